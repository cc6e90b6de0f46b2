"""Turns a decoded VoxFile into the public VoxelModel."""

import logging

from voxreader.model import Color, VoxelModel
from voxreader.palette import DEFAULT_PALETTE
from voxreader.voxfile import VoxFile

logger = logging.getLogger(__name__)


def shift_palette(palette: list[Color]) -> list[Color]:
    """Rotate a decoded palette right by one, duplicating its first color.

    The file stores color index i at position i - 1, so [c0, c1, ..., c255]
    becomes [c0, c0, c1, ..., c254].
    """
    if not palette:
        return []
    return [palette[0]] + palette[:-1]


def assemble(voxfile: VoxFile) -> VoxelModel:
    """Build the public model from the first frame and the palette."""
    frame = voxfile.frames[0]

    if voxfile.palette:
        palette = shift_palette(voxfile.palette)
    else:
        logger.debug("no RGBA chunk, using the default palette")
        palette = list(DEFAULT_PALETTE)

    return VoxelModel(
        version=voxfile.version,
        size=frame.size,
        voxels=frame.voxels,
        palette=palette,
        frames=voxfile.frames,
        materials=voxfile.materials,
        num_models=voxfile.num_models,
    )
