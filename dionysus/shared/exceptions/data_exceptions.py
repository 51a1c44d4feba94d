"""
Data-related exception classes.

Handles payload encoding and response parsing errors.
"""

from typing import Any, Optional
from .api_exceptions import DionysusAPIError


class DataEncodingError(DionysusAPIError):
    """Request body could not be serialized"""

    def __init__(
        self,
        message: str = "Data encoding failed",
        source_type: Optional[str] = None,
        original_data: Optional[Any] = None
    ):
        super().__init__(message)
        self.source_type = source_type
        self.original_data = original_data


class DataParsingError(DionysusAPIError):
    """Response body could not be decoded into the expected type"""

    def __init__(
        self,
        message: str = "Data parsing failed",
        target_type: Optional[str] = None,
        raw_content: Optional[str] = None
    ):
        super().__init__(message)
        self.target_type = target_type
        self.raw_content = raw_content[:1000] if raw_content else None  # Limit for logging
