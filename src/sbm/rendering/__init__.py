from .renderer import render

__all__ = ["render"]
