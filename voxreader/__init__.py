"""VoxReader: read MagicaVoxel .vox files into Python objects."""

import os
from typing import Union

from voxreader.assembler import assemble
from voxreader.cursor import ByteCursor
from voxreader.errors import (
    BadMagicError,
    ChunkSizeError,
    OutOfBoundsError,
    SourceError,
    UnknownChunkError,
    VoxError,
)
from voxreader.floats import decode_float32
from voxreader.model import Color, Frame, Material, MaterialType, Voxel, VoxelModel
from voxreader.palette import DEFAULT_PALETTE
from voxreader.source import fetch
from voxreader.voxfile import VoxFile


def parse(
    buffer, *, unknown_chunks: str = "skip", check_children: bool = True
) -> VoxelModel:
    """Decode a complete .vox file held in memory."""
    voxfile = VoxFile.parse(
        buffer, unknown_chunks=unknown_chunks, check_children=check_children
    )
    return assemble(voxfile)


def load(
    locator: Union[str, os.PathLike],
    *,
    timeout: float = 30,
    unknown_chunks: str = "skip",
    check_children: bool = True,
) -> VoxelModel:
    """Fetch a .vox file from a path or URL and decode it."""
    return assemble(
        VoxFile.read(
            locator,
            timeout=timeout,
            unknown_chunks=unknown_chunks,
            check_children=check_children,
        )
    )


__all__ = [
    "BadMagicError",
    "ByteCursor",
    "ChunkSizeError",
    "Color",
    "DEFAULT_PALETTE",
    "Frame",
    "Material",
    "MaterialType",
    "OutOfBoundsError",
    "SourceError",
    "UnknownChunkError",
    "Voxel",
    "VoxelModel",
    "VoxError",
    "VoxFile",
    "decode_float32",
    "fetch",
    "load",
    "parse",
]
