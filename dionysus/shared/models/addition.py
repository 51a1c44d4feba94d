from typing import List, Optional

from pydantic import ConfigDict, Field

from ..codec import ApiDateTime, WireModel


class Addition(WireModel):
    """Single addition record"""
    id: int = Field(..., description="Addition id")
    name: Optional[str] = Field(None, description="Display name")
    created_at: Optional[ApiDateTime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(extra="allow")


class AdditionResults(WireModel):
    """Page wrapper around addition records"""
    count: Optional[int] = Field(None, description="Total number of additions")
    next: Optional[str] = Field(None, description="URL of the next page")
    previous: Optional[str] = Field(None, description="URL of the previous page")
    results: List[Addition] = Field(..., description="Additions on this page")
