from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """ページング指定（page は 1 始まり）"""

    page: int = 1
    limit: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be at least 1")
        if self.limit < 1:
            raise ValueError("limit must be at least 1")

    @property
    def offset(self) -> int:
        """読み飛ばす件数"""
        return (self.page - 1) * self.limit

    def slice(self, items: list[T]) -> list[T]:
        """挿入順に並んだ全件からこのページ分を切り出す"""
        return items[self.offset : self.offset + self.limit]

    @classmethod
    def resolve(
        cls,
        page: int | None,
        limit: int | None,
        default_page: int = 1,
        default_limit: int = 10,
    ) -> Pagination:
        """未指定または 0 の値をデフォルト値で補う"""
        return cls(page=page or default_page, limit=limit or default_limit)


@dataclass(frozen=True)
class Page(Generic[T]):
    """ページング済みの検索結果"""

    items: list[T]
    total: int
    page: int
    limit: int

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
