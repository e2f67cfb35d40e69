from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class Headers(Mapping[str, str]):
    """Read-only header mapping with case-insensitive lookup.

    Iteration keeps the original casing, so `dict(headers)` gives `{"Content-Type": ...}`.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items = tuple(items)

    def _find(self, key: str) -> str | None:
        key = key.lower()
        for name, value in self._items:
            if name.lower() == key:
                return value
        return None

    def __getitem__(self, key: str) -> str:
        value = self._find(key) if isinstance(key, str) else None
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return len(self) == len(other) and all(
            isinstance(key, str) and self._find(key) == value for key, value in other.items()
        )

    def __repr__(self) -> str:
        return f"Headers({list(self._items)!r})"
