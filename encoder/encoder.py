import logging
import math
from collections.abc import AsyncIterator, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from encoder.boundary import create_boundary
from encoder.chunk import chunk
from encoder.headers import Headers
from encoder.normalize import escape_name, normalize_value
from encoder.protocols import FileLike, FormDataEntryValue, FormDataLike, is_file, is_form_data
from encoder.stream import get_stream_iterator

logger = logging.getLogger(__name__)

CRLF = "\r\n"
CRLF_BYTES = CRLF.encode()
DASHES = "--"
BOUNDARY_PREFIX = "form-data-boundary-"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FormDataEncoderOptions:
    """Options for `FormDataEncoder`.

    Args:
        boundary: The boundary token to use. A random one is generated when empty.
        enable_additional_headers: Emit extra per-part headers, such as `Content-Length`.
            Browsers don't send these, so some servers may reject them.
    """

    boundary: str | None = None
    enable_additional_headers: bool = False

    def __post_init__(self) -> None:
        if self.boundary is not None and not isinstance(self.boundary, str):
            raise TypeError("Expected boundary option to be a string.")


def _get_size(value: FileLike | bytes) -> int | None:
    size = getattr(value, "size", None) if is_file(value) else len(value)
    if size is None or (isinstance(size, float) and math.isnan(size)):
        return None
    return int(size)


class FormDataEncoder:
    """Encodes a `FormDataLike` into a `multipart/form-data` body.

    Implements the encoding algorithm from the HTML standard:
    https://html.spec.whatwg.org/multipage/form-control-infrastructure.html#multipart/form-data-encoding-algorithm

    The entries of the form are captured when the encoder is created, so changes made to the form
    afterwards are not reflected in the output. The instance can be passed as the body of an HTTP client:
    iterating it goes through `values()`, and async iterating it goes through `encode()`.

    ```python
    form = FormData()
    form.append("field", "Just a random string")
    form.append("file", File([b"Using files is class amazing"], "file.txt"))

    encoder = FormDataEncoder(form)

    async with httpx.AsyncClient() as client:
        await client.post("https://httpbin.org/post", headers=dict(encoder.headers), content=encoder.encode())
    ```
    """

    def __init__(
        self,
        form: FormDataLike,
        boundary: str | None = None,
        options: FormDataEncoderOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Create a new encoder.

        Args:
            form: The form to encode.
            boundary: The boundary token to use. Takes precedence over `options.boundary`.
            options: A `FormDataEncoderOptions`, or a mapping of its fields.

        Raises:
            TypeError: If any of the arguments has an unexpected type.
        """
        if not is_form_data(form):
            raise TypeError("Expected first argument to be a FormData instance.")

        if boundary is not None and not isinstance(boundary, str):
            raise TypeError("Expected boundary argument to be a string.")

        if options is None:
            options = FormDataEncoderOptions()
        elif isinstance(options, Mapping):
            options = FormDataEncoderOptions(**options)
        elif not isinstance(options, FormDataEncoderOptions):
            raise TypeError("Expected options argument to be an object.")

        self._options = options
        self._form: tuple[tuple[str, FormDataEntryValue], ...] = tuple(form.entries())

        self._boundary = BOUNDARY_PREFIX + (boundary or options.boundary or create_boundary())
        self._content_type = f"multipart/form-data; boundary={self._boundary}"
        self._footer = f"{DASHES}{self._boundary}{DASHES}{CRLF * 2}".encode()

        self._content_length = self._get_content_length()

        headers = [("Content-Type", self._content_type)]
        if self._content_length is not None:
            headers.append(("Content-Length", self._content_length))
        self._headers = Headers(headers)

        logger.debug(
            "Created encoder with boundary %r for %d entries, content length: %s",
            self._boundary,
            len(self._form),
            self._content_length,
        )

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def content_type(self) -> str:
        """The `Content-Type` header value, e.g. `multipart/form-data; boundary=form-data-boundary-...`."""
        return self._content_type

    @property
    def content_length(self) -> str | None:
        """The total length of the body, or `None` if any of the files has an unknown size."""
        return self._content_length

    @property
    def headers(self) -> Headers:
        """The `Content-Type` header, and the `Content-Length` header when the length is known."""
        return self._headers

    def _get_field_header(self, name: str, value: FileLike | bytes) -> bytes:
        header = f"{DASHES}{self._boundary}{CRLF}"
        header += f'Content-Disposition: form-data; name="{escape_name(name)}"'

        if is_file(value):
            header += f'; filename="{escape_name(value.name)}"{CRLF}'
            header += f"Content-Type: {value.type or DEFAULT_CONTENT_TYPE}"

        if self._options.enable_additional_headers:
            size = _get_size(value)
            if size is not None:
                header += f"{CRLF}Content-Length: {size}"

        return f"{header}{CRLF * 2}".encode()

    def _get_content_length(self) -> str | None:
        length = 0
        for name, value in self._entries():
            size = _get_size(value)
            if size is None:
                logger.debug("Content length is unknown, the size of %r is not set", name)
                return None

            length += len(self._get_field_header(name, value)) + size + len(CRLF_BYTES)

        return str(length + len(self._footer))

    def _entries(self) -> Iterator[tuple[str, FileLike | bytes]]:
        for name, raw in self._form:
            yield name, raw if is_file(raw) else normalize_value(raw).encode()

    def values(self) -> Iterator[bytes | FileLike]:
        """Go through the form parts, without reading the files.

        Yields, for every entry: its header block, then the file object itself or the encoded field value,
        then a CRLF. The footer comes last. Big values are not split into chunks.
        """
        for name, value in self._entries():
            yield self._get_field_header(name, value)
            yield value
            yield CRLF_BYTES

        yield self._footer

    async def encode(self) -> AsyncIterator[bytes]:
        """Go through the whole body, reading the files.

        Every piece is at most `MAX_CHUNK_SIZE` bytes long.

        Raises:
            TypeError: If a file's `stream()` returns an unsupported data source.
        """
        for part in self.values():
            if is_file(part):
                logger.debug("Reading file %r", part.name)
                async for piece in get_stream_iterator(part.stream()):
                    yield piece
            else:
                for piece in chunk(part):
                    yield piece

    def __iter__(self) -> Iterator[bytes | FileLike]:
        return self.values()

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.encode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(boundary={self._boundary!r}, content_length={self._content_length!r})"
