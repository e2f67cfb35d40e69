from collections.abc import Iterator
from typing import Any, Protocol, Union, runtime_checkable


@runtime_checkable
class FileLike(Protocol):
    """A named binary blob, as found in the values of a `FormDataLike`."""

    @property
    def name(self) -> str: ...
    @property
    def type(self) -> str:
        """The MIME type, or an empty string when unknown."""
    @property
    def size(self) -> int | None:
        """Size in bytes. `None` when unknown, which makes the total content length unknown too."""
    @property
    def last_modified(self) -> float: ...
    def stream(self) -> Any:
        """Return the contents as an async iterable of bytes, or as a reader with a `read(size)` method."""


FormDataEntryValue = Union[str, FileLike]


@runtime_checkable
class FormDataLike(Protocol):
    """An ordered multimap of field names to `FormDataEntryValue`."""

    def append(self, name: str, value: Any, filename: str | None = None) -> None: ...
    def get_all(self, name: str) -> list[FormDataEntryValue]: ...
    def entries(self) -> Iterator[tuple[str, FormDataEntryValue]]: ...
    def __iter__(self) -> Iterator[tuple[str, FormDataEntryValue]]: ...


def is_file(value: Any) -> bool:
    """Check if `value` can be encoded as a file part.

    Raw binary data (`bytes`, `memoryview`...) is not a file: a `FormDataLike` is expected to wrap it first.
    """
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    return getattr(value, "name", None) is not None and callable(getattr(value, "stream", None))


def is_form_data(value: Any) -> bool:
    """Check if `value` can be encoded by `FormDataEncoder`."""
    if isinstance(value, (str, bytes, dict)):
        return False
    return all(callable(getattr(value, attr, None)) for attr in ("append", "get_all", "entries", "__iter__"))
