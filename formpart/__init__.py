from formpart.errors import FormpartError, InvalidArgument
from formpart.part import MultipartPart, MultipartPartProtocol
from formpart.multipart import MultipartBody, build_multipart, choose_boundary

__all__ = [
    "FormpartError",
    "InvalidArgument",
    "MultipartPart",
    "MultipartPartProtocol",
    "MultipartBody",
    "build_multipart",
    "choose_boundary",
]
