from .auth import Credentials, LoginSuccess, EmptyPayload
from .account import Profile
from .addition import Addition, AdditionResults

__all__ = [
    "Credentials",
    "LoginSuccess",
    "EmptyPayload",
    "Profile",
    "Addition",
    "AdditionResults",
]
