import time
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from encoder.protocols import FileLike, FormDataEntryValue, is_file

BinaryPart = bytes | bytearray | memoryview | str


class File:
    """An in-memory file, built from a sequence of binary or text parts."""

    def __init__(
        self, parts: Iterable[BinaryPart], name: str, *, type: str = "", last_modified: float | None = None
    ) -> None:
        self._parts = tuple(part.encode("utf-8") if isinstance(part, str) else bytes(part) for part in parts)
        self._name = str(name)
        self._type = type.lower()
        self._last_modified = time.time() * 1000 if last_modified is None else last_modified

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> str:
        return self._type

    @property
    def size(self) -> int:
        return sum(len(part) for part in self._parts)

    @property
    def last_modified(self) -> float:
        return self._last_modified

    async def stream(self) -> AsyncIterator[bytes]:
        for part in self._parts:
            yield part

    async def read(self) -> bytes:
        return b"".join(self._parts)

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, type={self._type!r}, size={self.size})"


def _to_entry_value(value: Any, filename: str | None) -> FormDataEntryValue:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return File([value], filename if filename is not None else "blob")

    if is_file(value):
        if filename is None or filename == value.name:
            return value
        return _RenamedFile(value, filename)

    if filename is not None:
        return File([str(value)], filename)

    return str(value)


class _RenamedFile:
    """Exposes another file under a different name, without reading it."""

    def __init__(self, file: FileLike, name: str) -> None:
        self._file = file
        self.name = name

    def __getattr__(self, attr: str) -> Any:
        if attr.startswith("_"):
            raise AttributeError(attr)
        return getattr(self._file, attr)

    def __repr__(self) -> str:
        return f"{self._file!r} as {self.name!r}"


class FormData:
    """An ordered multimap of form fields, following the `FormData` web API.

    Raw binary values, and any value given along with a `filename`, are stored as `File`.
    Every other value is stored as its `str()`.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, FormDataEntryValue]] = []

    def append(self, name: str, value: Any, filename: str | None = None) -> None:
        self._entries.append((str(name), _to_entry_value(value, filename)))

    def set(self, name: str, value: Any, filename: str | None = None) -> None:
        """Replace every entry called `name` with a single one, kept at the position of the first."""
        name = str(name)
        entry = (name, _to_entry_value(value, filename))
        entries: list[tuple[str, FormDataEntryValue]] = []
        replaced = False
        for existing in self._entries:
            if existing[0] != name:
                entries.append(existing)
            elif not replaced:
                entries.append(entry)
                replaced = True
        if not replaced:
            entries.append(entry)
        self._entries = entries

    def get(self, name: str) -> FormDataEntryValue | None:
        for key, value in self._entries:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[FormDataEntryValue]:
        return [value for key, value in self._entries if key == name]

    def has(self, name: str) -> bool:
        return any(key == name for key, _ in self._entries)

    def delete(self, name: str) -> None:
        self._entries = [entry for entry in self._entries if entry[0] != name]

    def entries(self) -> Iterator[tuple[str, FormDataEntryValue]]:
        return iter(list(self._entries))

    def keys(self) -> Iterator[str]:
        return (key for key, _ in self.entries())

    def values(self) -> Iterator[FormDataEntryValue]:
        return (value for _, value in self.entries())

    def __iter__(self) -> Iterator[tuple[str, FormDataEntryValue]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FormData({self._entries!r})"
