from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

from .errors import InvalidArgument
from .part import DEFAULT_CONTENT_TYPE, MultipartPart, MultipartPartProtocol

logger = logging.getLogger(__name__)

DEFAULT_FIELD_CONTENT_TYPE = "text/plain; charset=utf-8"

FileValue = bytes | tuple[str, bytes, str | None]


def choose_boundary() -> str:
    return uuid.uuid4().hex


class MultipartBody:
    """
    Ordered collection of parts sharing one boundary token.

    Every part is rendered with an opening boundary line; only the last one
    also carries the closing marker.
    """

    def __init__(self, boundary: str | None = None) -> None:
        if boundary is None:
            boundary = choose_boundary()
            logger.debug("Generated multipart boundary %s", boundary)
        elif not isinstance(boundary, str) or not boundary:
            raise InvalidArgument("boundary must be a non-empty string")
        else:
            try:
                boundary.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidArgument(f"boundary is not encodable: {exc}") from exc
        self.boundary = boundary
        self._parts: list[MultipartPartProtocol] = []

    @property
    def parts(self) -> tuple[MultipartPartProtocol, ...]:
        return tuple(self._parts)

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    @property
    def content_length(self) -> int:
        return len(self.render())

    def add_part(self, part: MultipartPartProtocol) -> MultipartPartProtocol:
        if not isinstance(part, MultipartPartProtocol):
            raise InvalidArgument(f"not a multipart part: {part!r}")
        self._parts.append(part)
        return part

    def add_field(
        self,
        name: str,
        value: str | bytes,
        content_type: str = DEFAULT_FIELD_CONTENT_TYPE,
    ) -> MultipartPart:
        try:
            data = value.encode("utf-8") if isinstance(value, str) else value
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"field {name!r} is not encodable: {exc}") from exc
        part = MultipartPart(data, name, None, content_type)
        self._parts.append(part)
        return part

    def add_file(
        self,
        name: str,
        content: bytes,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> MultipartPart:
        part = MultipartPart(
            content,
            name,
            file_name if file_name is not None else name,
            content_type or DEFAULT_CONTENT_TYPE,
        )
        self._parts.append(part)
        return part

    def render(self) -> bytes:
        if not self._parts:
            return f"--{self.boundary}--\r\n".encode("utf-8")
        last = len(self._parts) - 1
        for index, part in enumerate(self._parts):
            part.has_top_boundary = True
            part.has_bottom_boundary = index == last
        body = b"".join(part.render(self.boundary) for part in self._parts)
        logger.debug(
            "Rendered multipart body: %d parts, %d bytes", len(self._parts), len(body)
        )
        return body

    def __bytes__(self) -> bytes:
        return self.render()

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[MultipartPartProtocol]:
        return iter(self._parts)

    def __repr__(self) -> str:
        return f"<MultipartBody boundary={self.boundary!r} {len(self._parts)} parts>"


def build_multipart(
    data: dict[str, str] | None,
    files: dict[str, FileValue],
    boundary: str | None = None,
) -> tuple[str, bytes]:
    """
    Encode form fields and file uploads into one body.

    Text fields are written first, then files, each in insertion order. A file
    is either raw bytes, named after its field and typed octet-stream, or a
    ``(filename, bytes, content_type)`` tuple whose content type may be None.
    Returns the request Content-Type header value and the body bytes.
    """
    body = MultipartBody(boundary)
    if data:
        for k, v in data.items():
            body.add_field(k, v)
    for field, val in files.items():
        if isinstance(val, (bytes, bytearray, memoryview)):
            body.add_file(field, val)
        elif isinstance(val, tuple) and len(val) == 3:
            filename, content, ctype = val
            body.add_file(field, content, filename, ctype)
        else:
            raise InvalidArgument(
                f"file {field!r} must be bytes or (filename, bytes, content_type)"
            )
    return body.content_type, body.render()
