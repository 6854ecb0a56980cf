from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """サーバー側で採番される不透明な識別子"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[T]) -> T:
        """新しい ID を採番する"""
        return cls(value=str(uuid.uuid4()))
