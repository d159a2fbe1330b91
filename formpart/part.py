from __future__ import annotations

from typing import Protocol, runtime_checkable

from .errors import InvalidArgument

CRLF = b"\r\n"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@runtime_checkable
class MultipartPartProtocol(Protocol):
    """What a body builder needs from a part: two flags and a renderer."""

    has_top_boundary: bool
    has_bottom_boundary: bool

    @property
    def content_length(self) -> int: ...

    def render(self, boundary: str) -> bytes: ...


class MultipartPart:
    """
    A single part of a multipart/form-data body.

    Payload and framing metadata are fixed at construction. Only the two
    boundary flags change afterwards, set by whoever arranges the parts into
    a body. The boundary token itself is passed to `render` on every call.
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        name: str,
        file_name: str | None = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        if data is None:
            raise InvalidArgument("data is required")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgument(
                f"data must be bytes-like, got {type(data).__name__}"
            )
        if name is None:
            raise InvalidArgument("name is required")
        if content_type is None:
            raise InvalidArgument("content_type is required")
        self._data = bytes(data)
        self._name = name
        self._file_name = file_name
        self._content_type = content_type
        try:
            self._headers = (
                f"Content-Disposition: {self._disposition()}\r\n"
                f"Content-Type: {content_type}\r\n\r\n"
            ).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"header text is not encodable: {exc}") from exc
        self.has_top_boundary = False
        self.has_bottom_boundary = False

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def name(self) -> str:
        return self._name

    @property
    def file_name(self) -> str | None:
        return self._file_name

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def content_length(self) -> int:
        # Derived on every access so it can never drift from the payload.
        return len(self._data)

    def _disposition(self) -> str:
        value = f'form-data; name="{self._name}"'
        if self._file_name is not None:
            value += f'; filename="{self._file_name}"'
        return value

    def render(self, boundary: str) -> bytes:
        """
        Encode this part for the wire.

        Emits the opening boundary line when `has_top_boundary` is set, the
        Content-Disposition and Content-Type headers, a blank line, the raw
        payload followed by CRLF, and the closing `--boundary--` line when
        `has_bottom_boundary` is set.
        """
        if not isinstance(boundary, str) or not boundary:
            raise InvalidArgument("boundary must be a non-empty string")
        try:
            token = boundary.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"boundary is not encodable: {exc}") from exc
        chunks: list[bytes] = []
        if self.has_top_boundary:
            chunks.append(b"--" + token + CRLF)
        chunks.append(self._headers)
        chunks.append(self._data)
        chunks.append(CRLF)
        if self.has_bottom_boundary:
            chunks.append(b"--" + token + b"--" + CRLF)
        return b"".join(chunks)

    def __repr__(self) -> str:
        return (
            f"<MultipartPart name={self._name!r} file_name={self._file_name!r} "
            f"{self._content_type} {self.content_length} bytes>"
        )
