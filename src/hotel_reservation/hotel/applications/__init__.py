from .add_room import AddRoomService
from .create_hotel import CreateHotelService
from .query_catalog import QueryCatalogService

__all__ = ["AddRoomService", "CreateHotelService", "QueryCatalogService"]
