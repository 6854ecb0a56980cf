from dataclasses import dataclass

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating:
    """ホテルの評価（1〜5）"""

    value: int

    def __post_init__(self) -> None:
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValueError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}: {self.value}"
            )

    def __int__(self) -> int:
        return self.value
