from collections.abc import Iterator

MAX_CHUNK_SIZE = 65536


def chunk(value: bytes) -> Iterator[bytes]:
    """Split `value` into pieces of at most `MAX_CHUNK_SIZE` bytes.

    A value that already fits is yielded as-is, without copying.
    Only the last piece can be shorter than `MAX_CHUNK_SIZE`.
    """
    if len(value) <= MAX_CHUNK_SIZE:
        yield value
        return

    view = memoryview(value)
    for offset in range(0, len(view), MAX_CHUNK_SIZE):
        yield view[offset : offset + MAX_CHUNK_SIZE].tobytes()
