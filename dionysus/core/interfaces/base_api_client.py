"""
Base API Client interface and abstract implementation.

Implements Strategy and Template Method patterns: subclasses decide how a
request is built and how a response is interpreted, while the base class
owns the transport, logging and the collapse of every failure into a
single ``APIResponse``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from enum import Enum
import time
import httpx
import logging
from pydantic import BaseModel

from ...shared.exceptions import (
    APIClientError,
    APIStatusError,
    DataParsingError,
    DionysusAPIError,
    NetworkError,
    create_network_exception_from_httpx_error
)
from ..logging_config import new_request_id

logger = logging.getLogger(__name__)

T = TypeVar('T')


class AuthenticationStrategy(ABC):
    """Abstract authentication strategy"""

    @abstractmethod
    def apply_auth(self, request_params: Dict[str, Any]) -> Dict[str, Any]:
        """Apply authentication to request parameters"""
        pass


class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"


class ErrorKind(Enum):
    """Where a failed call went wrong"""
    LOCAL = "local"          # bad URL, body encoding, missing token
    TRANSPORT = "transport"  # no response from the backend
    STATUS = "status"        # unexpected status code
    DECODE = "decode"        # body does not match the expected type


def classify_error(error: DionysusAPIError) -> ErrorKind:
    """Map an exception raised during a call to its ErrorKind"""
    if isinstance(error, NetworkError):
        return ErrorKind.TRANSPORT
    if isinstance(error, APIStatusError):
        return ErrorKind.STATUS
    if isinstance(error, DataParsingError):
        return ErrorKind.DECODE
    # RequestBuildError, DataEncodingError, TokenMissingError, uninitialized client
    return ErrorKind.LOCAL


class APIResponse(BaseModel, Generic[T]):
    """Generic API response wrapper"""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def failure(cls, error: DionysusAPIError) -> "APIResponse":
        return cls(
            success=False,
            error=str(error),
            error_kind=classify_error(error),
            status_code=error.status_code
        )


class BaseAPIClient(ABC):
    """
    Abstract base class for API clients implementing Template Method pattern.

    Owns an ``httpx.AsyncClient`` for its lifetime; use it as an async
    context manager.
    """

    def __init__(
        self,
        base_url: str,
        auth_strategy: AuthenticationStrategy,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.auth_strategy = auth_strategy
        self.timeout = timeout
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self.client = httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.aclose()

    async def aclose(self) -> None:
        if self.client:
            await self.client.aclose()
            self.client = None

    # Template method pattern implementation
    async def request(
        self,
        path: str,
        method: RequestMethod = RequestMethod.GET,
        body: Any = None,
        response_type: Any = None,
        expected_status: int = 200,
        ensure_token_set: bool = True
    ) -> APIResponse:
        """
        Template method for making API requests.

        Follows the pattern:
        1. Build request (hook method, applies authentication)
        2. Send it over the transport
        3. Interpret status and body (hook method)

        Every outcome is returned as an APIResponse; library errors never
        propagate to the caller.
        """
        new_request_id()
        operation = f"{method.value} {path}"
        try:
            # Step 1: Build request (hook method)
            http_request = self._build_request(path, method, body, ensure_token_set)

            # Step 2: Send it
            response = await self._send(http_request, operation)

            # Step 3: Interpret response (hook method)
            data = self._interpret_response(response, expected_status, response_type)

            return APIResponse(success=True, data=data, status_code=response.status_code)

        except DionysusAPIError as e:
            logger.warning(
                f"API request failed: {operation}: {e}",
                extra={"component": "api_client", "operation": operation, "status_code": e.status_code}
            )
            return APIResponse.failure(e)

    async def _send(self, http_request: httpx.Request, operation: str) -> httpx.Response:
        """Send a built request and log its timing"""
        if not self.client:
            raise APIClientError("Client not initialized. Use async context manager.")

        start_time = time.perf_counter()
        try:
            response = await self.client.send(http_request)
        except httpx.HTTPError as e:
            # Convert httpx errors to our custom exceptions
            raise create_network_exception_from_httpx_error(e) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"{operation} -> {response.status_code} ({duration_ms:.1f}ms)",
            extra={
                "component": "api_client",
                "operation": operation,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2)
            }
        )
        return response

    @abstractmethod
    def _build_request(
        self,
        path: str,
        method: RequestMethod,
        body: Any,
        ensure_token_set: bool
    ) -> httpx.Request:
        """Construct the outgoing request (must be implemented by subclasses)"""
        pass

    @abstractmethod
    def _interpret_response(
        self,
        response: httpx.Response,
        expected_status: int,
        response_type: Any
    ) -> Any:
        """Validate status and decode body (must be implemented by subclasses)"""
        pass
