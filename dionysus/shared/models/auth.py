from pydantic import Field

from ..codec import ApiDateTime, WireModel


class Credentials(WireModel):
    """Login request body"""
    username: str = Field(..., description="Account username")
    password: str = Field(..., repr=False, description="Account password")


class LoginSuccess(WireModel):
    """Login response: opaque token and its expiry"""
    token: str = Field(..., min_length=1, description="Opaque auth token")
    expiry: ApiDateTime = Field(..., description="Token expiry as reported by the backend")


class EmptyPayload(WireModel):
    """Body for POST requests that carry no data"""
    pass
