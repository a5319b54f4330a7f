from .models import Bookmark, Category, Document, Header

__all__ = [
    "Bookmark",
    "Category",
    "Document",
    "Header",
]
