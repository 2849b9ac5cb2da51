from .error_response import ErrorResponse
from .parse_request import ParseRequest
from .remote_set_document import CommandDocument, RemoteDocument, RemoteSetDocument

__all__ = [
    "CommandDocument",
    "ErrorResponse",
    "ParseRequest",
    "RemoteDocument",
    "RemoteSetDocument",
]
