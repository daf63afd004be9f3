from models.time_range import TimeRange
from models.user import Account, Admin, Manager, Role, User, create_account
from models.room import Room, RoomSchedule
from models.reservation import Reservation

__all__ = [
    "TimeRange",
    "Account",
    "Admin",
    "Manager",
    "Role",
    "User",
    "create_account",
    "Room",
    "RoomSchedule",
    "Reservation",
]
