import inspect
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

from encoder.chunk import MAX_CHUNK_SIZE, chunk


async def _read_stream(reader: Any) -> AsyncIterator[bytes]:
    while True:
        data = reader.read(MAX_CHUNK_SIZE)
        if inspect.isawaitable(data):
            data = await data
        if not data:
            break
        yield bytes(data)


async def _chunk_stream(stream: AsyncIterable[bytes]) -> AsyncIterator[bytes]:
    async for value in stream:
        for piece in chunk(value):
            yield piece


def get_stream_iterator(source: Any) -> AsyncIterator[bytes]:
    """Turn whatever `FileLike.stream()` returned into an async iterator of bytes.

    Args:
        source: Either an async iterable of bytes, or a reader with a `read(size)` method.
            The result of `read` may be awaitable (e.g. `asyncio.StreamReader`) or plain
            bytes (e.g. `io.BytesIO`). An empty buffer marks the end of the stream.

    Raises:
        TypeError: If `source` is neither of the above.
    """
    if callable(getattr(source, "__aiter__", None)):
        return _chunk_stream(source)

    if callable(getattr(source, "read", None)):
        return _chunk_stream(_read_stream(source))

    raise TypeError("Unsupported data source: Expected either a readable object or an async iterable.")
