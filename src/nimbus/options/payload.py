"""Opaque payload content for scripts and credential material."""

from pathlib import Path
from typing import Any, Union

from nimbus.utils.templates import render_template


class Payload:
    """Immutable byte content with a content type."""

    __slots__ = ("_data", "_content_type")

    def __init__(self, data: Union[bytes, str], content_type: str = "application/octet-stream"):
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Payload data must be bytes or str, not {type(data).__name__}")
        self._data = bytes(data)
        self._content_type = content_type

    @classmethod
    def from_string(cls, text: str, content_type: str = "text/plain") -> "Payload":
        """Create a payload from text."""
        return cls(text, content_type=content_type)

    @classmethod
    def from_file(cls, path: Union[str, Path], content_type: str = "application/octet-stream") -> "Payload":
        """Create a payload from the contents of a file."""
        return cls(Path(path).read_bytes(), content_type=content_type)

    @classmethod
    def from_template(cls, template: str, **context: Any) -> "Payload":
        """Render a Jinja2 template into a shell script payload."""
        return cls(render_template(template, **context), content_type="text/x-shellscript")

    @property
    def content_type(self) -> str:
        return self._content_type

    def as_bytes(self) -> bytes:
        return self._data

    def as_text(self, encoding: str = "utf-8") -> str:
        return self._data.decode(encoding)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, Payload):
            return NotImplemented
        return self._data == other._data and self._content_type == other._content_type

    def __hash__(self):
        return hash((self._data, self._content_type))

    def __repr__(self):
        return f"Payload({len(self._data)} bytes, content_type={self._content_type!r})"
