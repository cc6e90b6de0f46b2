"""Exceptions raised while reading .vox files.

Every decode failure derives from VoxError, which is itself a ValueError so
callers that only care about "bad file" can keep catching ValueError.
SourceError is deliberately not a VoxError: it means the bytes never arrived.
"""

from typing import Optional


class VoxError(ValueError):
    """Base class for .vox decode errors."""


class OutOfBoundsError(VoxError):
    """Raised when a read runs past the end of the buffer."""

    def __init__(self, position: int, length: int):
        super().__init__(f"Read out of bounds at {position}: buffer length is {length}")
        self.position = position
        self.length = length


class BadMagicError(VoxError):
    """Raised when the file does not start with "VOX "."""

    def __init__(self, magic: str):
        super().__init__(f"Invalid .vox file header: {magic!r}")
        self.magic = magic


class UnknownChunkError(VoxError):
    """Raised for unrecognised chunk IDs when unknown chunks are not skipped."""

    def __init__(self, chunk_id: bytes):
        super().__init__(f"Invalid chunk ID: {chunk_id!r}")
        self.chunk_id = chunk_id


class ChunkSizeError(VoxError):
    """Raised when child chunks do not fit their declared size."""

    def __init__(self, chunk_id: bytes, expected: int, actual: int):
        super().__init__(
            f"Chunk {chunk_id!r} declares {expected} bytes of children; read {actual}"
        )
        self.chunk_id = chunk_id
        self.expected = expected
        self.actual = actual


class SourceError(Exception):
    """Raised when the bytes of a .vox file could not be fetched."""

    def __init__(self, locator: str, reason: Optional[str] = None):
        message = f"Could not fetch {locator!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.locator = locator
