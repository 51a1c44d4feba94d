"""
Response interpretation for the Dionysus backend.

Each call shape requires one exact status code. Anything else, as well as a
body that does not decode into the expected type, is raised as an exception
for the client to collapse into a failed ``APIResponse``.
"""

import logging
from typing import Any, Optional, Type, TypeVar

import httpx

from ..codec import CodecPolicy
from ..exceptions import DataParsingError, create_status_exception_from_response

logger = logging.getLogger(__name__)

T = TypeVar('T')

STATUS_OK = 200
STATUS_NO_CONTENT = 204


class ResponseInterpreter:
    """Classifies responses into decoded success, empty success or failure"""

    def __init__(self, codec: CodecPolicy):
        self.codec = codec

    def interpret(self, response: httpx.Response, expected_status: int, response_type: Optional[Type[T]] = None) -> Optional[T]:
        """Check the status, then decode the body unless no type is expected"""
        self.ensure_status(response, expected_status)
        if response_type is None:
            return None
        return self.decode(response, response_type)

    def interpret_fetch(self, response: httpx.Response, response_type: Type[T]) -> T:
        """GET with a body: 200 and a body decoding as ``response_type``"""
        return self.interpret(response, STATUS_OK, response_type)

    def interpret_submit(self, response: httpx.Response, response_type: Type[T]) -> T:
        """POST with a body: 200 and a body decoding as ``response_type``"""
        return self.interpret(response, STATUS_OK, response_type)

    def interpret_no_response(self, response: httpx.Response) -> None:
        """POST without a body: 204, body ignored"""
        self.interpret(response, STATUS_NO_CONTENT)

    def ensure_status(self, response: httpx.Response, expected_status: int) -> None:
        if response.status_code == expected_status:
            return
        logger.warning(
            f"error statusCode {response.status_code}: {response.text[:500]}",
            extra={"component": "response_interpreter", "status_code": response.status_code}
        )
        raise create_status_exception_from_response(response, expected_status)

    def decode(self, response: httpx.Response, response_type: Type[T]) -> Any:
        try:
            return self.codec.decode(response.content, response_type)
        except DataParsingError as e:
            logger.error(f"Response decoding failed ({response.status_code}): {e}")
            raise
