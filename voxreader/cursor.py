"""Sequential reader over an in-memory .vox buffer."""

from typing import Union

from voxreader.errors import OutOfBoundsError

Buffer = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """Bounds-checked cursor over a byte buffer.

    The buffer is wrapped in a memoryview, so neither the cursor nor the
    sub-cursors it hands out copy the underlying bytes.
    """

    def __init__(self, buffer: Buffer):
        self.buffer = memoryview(buffer).cast("B")
        self.position = 0

    def __len__(self) -> int:
        return len(self.buffer)

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self.position

    def has_next(self) -> bool:
        """Whether at least one byte is left."""
        return self.position < len(self.buffer)

    def next(self) -> int:
        """Read a single byte."""
        if self.position >= len(self.buffer):
            raise OutOfBoundsError(self.position, len(self.buffer))
        byte = self.buffer[self.position]
        self.position += 1
        return byte

    def _advance(self, n: int) -> int:
        start = self.position
        if n < 0 or start + n > len(self.buffer):
            raise OutOfBoundsError(start + n, len(self.buffer))
        self.position = start + n
        return start

    def read_bytes(self, n: int) -> bytes:
        """Read n bytes."""
        start = self._advance(n)
        return self.buffer[start : start + n].tobytes()

    def read_ascii(self, n: int) -> str:
        """Read n bytes as characters, one per byte."""
        return self.read_bytes(n).decode("latin-1")

    def read_uint32(self) -> int:
        """Read an unsigned little-endian 32-bit integer."""
        return int.from_bytes(self.read_bytes(4), "little", signed=False)

    def skip(self, n: int):
        """Skip over n bytes."""
        self._advance(n)

    def sub_cursor(self, n: int) -> "ByteCursor":
        """Split off a cursor over the next n bytes and move past them."""
        start = self._advance(n)
        return ByteCursor(self.buffer[start : start + n])
