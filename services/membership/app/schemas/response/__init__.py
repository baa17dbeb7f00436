from .ErrorResponse import ErrorResponse
from .MessageResponse import MessageResponse

__all__ = [
    "ErrorResponse",
    "MessageResponse",
]
