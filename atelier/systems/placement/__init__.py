from atelier.systems.placement.room_controller import RoomController

__all__ = ['RoomController']
