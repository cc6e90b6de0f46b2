"""Decoded model types for VoxReader.

The goal of this module is to provide the Pythonic result of reading a
MagicaVoxel .vox file: a bounding box, the voxels inside it, and the 256
colors those voxels index into.
"""

import enum
from typing import NamedTuple, Optional, Union


class Color(NamedTuple):
    """Color class.

    Colors are immutable, so the default palette can be shared between models.
    """

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_abgr(cls, value: int) -> "Color":
        """Build a color from a packed 0xAABBGGRR integer."""
        return cls(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )


class Voxel(NamedTuple):
    """A single voxel and the palette index of its color."""

    x: int
    y: int
    z: int
    color_index: int


class Frame:
    """One model (animation frame) of a .vox file.

    A frame is filled by one SIZE chunk and one XYZI chunk; either may be
    missing from a malformed file, in which case `size` stays None or
    `voxels` stays empty.
    """

    def __init__(
        self,
        size: Optional[tuple[int, int, int]] = None,
        voxels: Optional[list[Voxel]] = None,
    ):
        self.size = size
        self.voxels: list[Voxel] = voxels if voxels is not None else []

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return False
        return self.size == other.size and self.voxels == other.voxels

    def __repr__(self):
        return f"Frame(size={self.size!r}, voxels=<{len(self.voxels)} voxels>)"


class MaterialType(enum.IntEnum):
    DIFFUSE = 0
    METAL = 1
    GLASS = 2
    EMISSIVE = 3


# property bits of a MATT chunk, lowest bit first
MATERIAL_PROPERTIES = (
    "plastic",
    "roughness",
    "specular",
    "ior",
    "attenuation",
    "power",
    "glow",
)
TOTAL_POWER_BIT = 1 << len(MATERIAL_PROPERTIES)


class Material:
    """Material class."""

    def __init__(
        self,
        material_id: int,
        type: Union[MaterialType, int],
        weight: float,
        property_bits: int,
        properties: dict[str, float],
    ):
        self.id = material_id
        self.type = type
        self.weight = weight
        self.property_bits = property_bits
        self.properties = properties

    @property
    def is_total_power(self) -> bool:
        return bool(self.property_bits & TOTAL_POWER_BIT)

    def __repr__(self):
        return (
            f"Material(id={self.id}, type={self.type!r}, weight={self.weight}, "
            f"properties={self.properties!r})"
        )


class VoxelModel:
    """Result of reading a .vox file.

    `size` and `voxels` come from the first frame; every decoded frame is
    still available through `frames`.
    """

    def __init__(
        self,
        version: int,
        size: Optional[tuple[int, int, int]],
        voxels: list[Voxel],
        palette: list[Color],
        frames: list[Frame],
        materials: list[Material],
        num_models: Optional[int] = None,
    ):
        self.version = version
        self.size = size
        self.voxels = voxels
        self.palette = palette
        self.frames = frames
        self.materials = materials
        self.num_models = num_models

    def color_of(self, voxel: Voxel) -> Color:
        """Palette color a voxel refers to."""
        return self.palette[voxel.color_index]
