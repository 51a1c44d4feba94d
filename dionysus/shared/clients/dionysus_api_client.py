"""
Dionysus backend API client.

Implements BaseAPIClient with token authentication, snake_case JSON and the
account/addition endpoints.
"""

import logging
from typing import Any, List, Optional, Type, TypeVar, Union

import httpx

from ...core.config import settings
from ...core.interfaces.base_api_client import (
    APIResponse,
    BaseAPIClient,
    RequestMethod
)
from ...core.interfaces.token_store import TokenStore
from ..codec import CodecPolicy, DateFormat
from ..models import (
    Addition,
    AdditionResults,
    Credentials,
    EmptyPayload,
    LoginSuccess,
    Profile
)
from ..stores import KeyringTokenStore
from .request_builder import RequestBuilder
from .response_interpreter import STATUS_NO_CONTENT, STATUS_OK, ResponseInterpreter
from .strategies import TokenAuthStrategy

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

LOGIN_PATH = "/api/v1/auth/login/"
LOGOUT_PATH = "/api/v1/auth/logout/"
ACCOUNT_PATH = "/api/v1/auth/account/"
ADDITIONS_PATH = "/api/v1/addition/"


class DionysusAPIClient(BaseAPIClient):
    """
    Client for the Dionysus backend.

    Pass one instance to whatever needs it and use it as an async context
    manager. Generic calls (``fetch``, ``submit``, ``submit_no_response``)
    and domain operations never raise for request, transport, status or
    decoding problems; they return an ``APIResponse`` whose ``success``
    flag tells the outcome. Results are returned to the awaiting coroutine,
    so success and failure both arrive on the caller's event loop.

    The token is read from the store right before each request. A logout
    racing with an in-flight authenticated request is not guarded against.
    """

    def __init__(
        self,
        token_store: TokenStore,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        date_format: Union[DateFormat, str, None] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.token_store = token_store
        auth_strategy = TokenAuthStrategy(token_store)

        super().__init__(
            base_url=base_url or settings.api_base_url,
            auth_strategy=auth_strategy,
            timeout=timeout or settings.request_timeout,
            transport=transport
        )

        self.codec = CodecPolicy(date_format or settings.date_format)
        self.builder = RequestBuilder(self.base_url, token_store, auth_strategy, self.codec)
        self.interpreter = ResponseInterpreter(self.codec)

    @classmethod
    def from_settings(cls, token_store: Optional[TokenStore] = None, **kwargs) -> "DionysusAPIClient":
        """Create a client for the configured origin, keyring-backed by default"""
        return cls(token_store or KeyringTokenStore(), **kwargs)

    # Authentication state
    def current_token(self) -> Optional[str]:
        return self.token_store.read()

    def is_authenticated(self) -> bool:
        token = self.current_token()
        return bool(token)

    # BaseAPIClient hooks
    def _build_request(
        self,
        path: str,
        method: RequestMethod,
        body: Any,
        ensure_token_set: bool
    ) -> httpx.Request:
        return self.builder.build(path, method, body=body, ensure_token_set=ensure_token_set)

    def _interpret_response(
        self,
        response: httpx.Response,
        expected_status: int,
        response_type: Any
    ) -> Any:
        return self.interpreter.interpret(response, expected_status, response_type)

    # Generic operations
    async def fetch(self, path: str, response_type: Type[T], ensure_token_set: bool = True) -> APIResponse[T]:
        """GET ``path`` and decode a 200 body as ``response_type``"""
        return await self.request(
            path,
            RequestMethod.GET,
            response_type=response_type,
            expected_status=STATUS_OK,
            ensure_token_set=ensure_token_set
        )

    async def submit(
        self,
        path: str,
        payload: Any,
        response_type: Type[R],
        ensure_token_set: bool = True
    ) -> APIResponse[R]:
        """POST ``payload`` to ``path`` and decode a 200 body as ``response_type``"""
        return await self.request(
            path,
            RequestMethod.POST,
            body=payload,
            response_type=response_type,
            expected_status=STATUS_OK,
            ensure_token_set=ensure_token_set
        )

    async def submit_no_response(self, path: str, payload: Any, ensure_token_set: bool = True) -> APIResponse[None]:
        """POST ``payload`` to ``path`` expecting 204; the body is ignored"""
        return await self.request(
            path,
            RequestMethod.POST,
            body=payload,
            expected_status=STATUS_NO_CONTENT,
            ensure_token_set=ensure_token_set
        )

    # Domain operations
    async def login(self, username: str, password: str) -> APIResponse[LoginSuccess]:
        """Exchange credentials for a token and persist it"""
        payload = Credentials(username=username, password=password)
        result = await self.submit(LOGIN_PATH, payload, LoginSuccess, ensure_token_set=False)
        if not result.success:
            logger.warning("failed to login")
            return result

        self.token_store.save(result.data.token)
        logger.info(f"logged in as {username}")
        return result

    async def logout(self) -> APIResponse[None]:
        """Invalidate the token on the backend, then forget it locally"""
        result = await self.submit_no_response(LOGOUT_PATH, EmptyPayload())
        if not result.success:
            logger.warning("failed to logout")
            return result

        self.token_store.delete()
        logger.info("logged out")
        return result

    async def load_profile(self) -> APIResponse[Profile]:
        result = await self.fetch(ACCOUNT_PATH, Profile)
        if not result.success:
            logger.warning("failed to get profile")
        return result

    async def load_additions(self) -> APIResponse[List[Addition]]:
        result = await self.fetch(ADDITIONS_PATH, AdditionResults)
        if not result.success:
            logger.warning("failed to get additions")
            return result

        return APIResponse(success=True, data=result.data.results, status_code=result.status_code)
