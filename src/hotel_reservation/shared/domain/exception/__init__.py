from .exceptions import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    DuplicateResourceException,
    ForbiddenException,
    InvalidCredentialsException,
    OptimisticLockException,
    ResourceNotFoundException,
    RoomAlreadyBookedException,
    UnauthorizedException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "BusinessRuleViolationException",
    "InvalidCredentialsException",
    "UnauthorizedException",
    "ForbiddenException",
    "ResourceNotFoundException",
    "ConflictException",
    "RoomAlreadyBookedException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
