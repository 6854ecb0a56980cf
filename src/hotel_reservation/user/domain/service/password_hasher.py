from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """パスワードのハッシュ化・照合"""

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, plain_password: str, digest: str) -> bool:
        raise NotImplementedError
