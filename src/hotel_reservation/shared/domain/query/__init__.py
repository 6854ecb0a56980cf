from .pagination import Page, Pagination

__all__ = ["Page", "Pagination"]
