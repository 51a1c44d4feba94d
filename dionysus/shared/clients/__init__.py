from .dionysus_api_client import DionysusAPIClient
from .request_builder import RequestBuilder
from .response_interpreter import ResponseInterpreter
from .strategies import TokenAuthStrategy

__all__ = [
    "DionysusAPIClient",
    "RequestBuilder",
    "ResponseInterpreter",
    "TokenAuthStrategy",
]
