from typing import Optional

from pydantic import ConfigDict, Field

from ..codec import WireModel


class Profile(WireModel):
    """Authenticated account as returned by the backend"""
    id: Optional[int] = Field(None, description="Account id")
    username: str = Field(..., description="Account username")
    email: Optional[str] = Field(None, description="Account e-mail")
    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")

    model_config = ConfigDict(extra="allow")
