# src/sbm/document/models.py

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Bookmark:
    """A link to a website with a short name and a description."""

    name: str
    description: str
    url: str

    def render(self) -> str:
        return f"{self.name}|{self.description}|{self.url}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Header:
    """Category label.

    `icon` is None when the source line had no second field. An empty
    string is a present-but-empty icon and renders with a trailing `|`.
    """

    name: str
    icon: str | None = None

    def render(self) -> str:
        if self.icon is None:
            return f"#{self.name}"
        return f"#{self.name}|{self.icon}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Category:
    """A header with the bookmarks listed under it, in source order."""

    header: Header
    bookmarks: tuple[Bookmark, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable so equality does not depend on the caller's container
        object.__setattr__(self, "bookmarks", tuple(self.bookmarks))

    def with_bookmark(self, bookmark: Bookmark) -> "Category":
        return Category(header=self.header, bookmarks=(*self.bookmarks, bookmark))

    def render(self) -> str:
        lines = [self.header.render()]
        lines.extend(bookmark.render() for bookmark in self.bookmarks)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.bookmarks)

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(self.bookmarks)


@dataclass(frozen=True)
class Document:
    """Root of a parsed bookmark file: categories in source order.

    Immutable. Tree-shaped. Safe to share between threads once built.
    """

    categories: tuple[Category, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))

    @classmethod
    def from_categories(cls, categories: Iterable[Category]) -> "Document":
        return cls(categories=tuple(categories))

    def with_category(self, category: Category) -> "Document":
        return Document(categories=(*self.categories, category))

    def bookmarks(self) -> Iterator[Bookmark]:
        """Every bookmark in the document, category by category."""
        for category in self.categories:
            yield from category.bookmarks

    def render(self) -> str:
        return "\n".join(category.render() for category in self.categories)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)
