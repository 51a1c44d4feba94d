"""
Request construction for the Dionysus backend.

Turns a relative path, method and optional body into an ``httpx.Request``
with JSON headers, an encoded body and authentication applied. Every
failure here happens before any network I/O.
"""

import logging
from typing import Any, Dict

import httpx

from ...core.interfaces.base_api_client import AuthenticationStrategy, RequestMethod
from ...core.interfaces.token_store import TokenStore
from ..codec import CodecPolicy
from ..exceptions import DataEncodingError, RequestBuildError, TokenMissingError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class RequestBuilder:
    """Builds authenticated JSON requests against a fixed origin"""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        auth_strategy: AuthenticationStrategy,
        codec: CodecPolicy
    ):
        self.base_url = base_url.rstrip('/')
        self.token_store = token_store
        self.auth_strategy = auth_strategy
        self.codec = codec

    def build(
        self,
        path: str,
        method: RequestMethod = RequestMethod.GET,
        body: Any = None,
        ensure_token_set: bool = True
    ) -> httpx.Request:
        """
        Build a request for ``path``.

        Args:
            path: Path relative to the origin, e.g. ``/api/v1/addition/``
            method: HTTP method
            body: Payload to encode as JSON; None sends no body
            ensure_token_set: Refuse to build when no token is stored

        Raises:
            RequestBuildError: the resulting URL cannot be parsed
            TokenMissingError: a token is required but none is stored
            DataEncodingError: the body cannot be serialized
        """
        url = self._build_url(path)

        if ensure_token_set and not self.token_store.read():
            logger.info(f"Refusing {method.value} {path}: no token stored")
            raise TokenMissingError(f"{method.value} {path} requires an auth token")

        request_params: Dict[str, Any] = {
            "method": method.value,
            "url": url,
            "headers": {"Accept": JSON_MEDIA_TYPE},
        }

        if body is not None:
            try:
                request_params["content"] = self.codec.encode(body)
            except DataEncodingError as e:
                logger.error(f"error json serialize: {e}")
                raise
            request_params["headers"]["Content-Type"] = JSON_MEDIA_TYPE

        request_params = self.auth_strategy.apply_auth(request_params)

        return httpx.Request(**request_params)

    def _build_url(self, path: str) -> httpx.URL:
        raw_url = f"{self.base_url}{path}"
        try:
            url = httpx.URL(raw_url)
        except (httpx.InvalidURL, TypeError) as e:
            logger.error(f"error URL: {path}: {e}")
            raise RequestBuildError(f"Invalid URL {raw_url!r}: {e}", path=path) from e

        if url.scheme not in ("http", "https") or not url.host:
            logger.error(f"error URL: {path}")
            raise RequestBuildError(f"Invalid URL {raw_url!r}: missing scheme or host", path=path)
        return url
