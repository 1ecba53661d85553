from .client import SuperAppClient
from .errors import ApiError, DecodeError, EncodeError, NetworkError, RequestTimeoutError, SuperAppError

__all__ = [
    "SuperAppClient",
    "SuperAppError",
    "ApiError",
    "DecodeError",
    "EncodeError",
    "NetworkError",
    "RequestTimeoutError",
]
