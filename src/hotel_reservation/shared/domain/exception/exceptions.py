class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値の検証エラー（フィールドごとのメッセージをまとめて保持する）"""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidCredentialsException(DomainException):
    """メールアドレスまたはパスワードが一致しない場合"""

    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


class UnauthorizedException(DomainException):
    """認証情報が無い・不正・期限切れの場合"""

    pass


class ForbiddenException(DomainException):
    """認証済みだが権限（所有者または管理者）が無い場合"""

    def __init__(self, message: str = "Access forbidden") -> None:
        super().__init__(message)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合（検索結果が空の場合を含む）"""

    pass


class ConflictException(DomainException):
    """リソースの状態と競合する場合"""

    pass


class RoomAlreadyBookedException(ConflictException):
    """指定期間に部屋が予約済みの場合"""

    def __init__(self, room_id: object) -> None:
        super().__init__(f"Room {room_id} is already booked")
        self.room_id = room_id


class DuplicateResourceException(ConflictException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(ConflictException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    pass
