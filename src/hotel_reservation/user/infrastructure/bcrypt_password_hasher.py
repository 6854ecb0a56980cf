import bcrypt

from hotel_reservation.user.domain.service import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt によるパスワードハッシュ"""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, plain_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plain_password: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # 不正な形式のダイジェスト
            return False
