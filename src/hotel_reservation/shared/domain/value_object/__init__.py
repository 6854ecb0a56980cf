from .actor import Actor
from .entity_id import EntityId

__all__ = ["Actor", "EntityId"]
