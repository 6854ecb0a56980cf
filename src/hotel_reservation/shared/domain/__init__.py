from .entity import Entity
from .exception import (
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
from .query import Page, Pagination
from .repository import Repository
from .value_object import Actor, EntityId

__all__ = [
    "Entity",
    "Repository",
    "Page",
    "Pagination",
    "Actor",
    "EntityId",
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
