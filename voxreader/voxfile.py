"""VoxFile structure and related functions.

The goal of this module is to walk the chunk tree of a MagicaVoxel .vox file
and decode the chunks VoxReader understands into a VoxFile. Turning a VoxFile
into the public VoxelModel is left to voxreader.assembler.

File layout:

    4        | char[4]    | "VOX "
    4        | int        | version number
    ...      | chunk      | MAIN, whose children are the other chunks

Chunk layout:

    4        | char[4]    | chunk id
    4        | int        | num bytes of chunk content (N)
    4        | int        | num bytes of children chunks (M)
    N        |            | chunk content
    M        |            | children chunks
"""

import logging
import os
from typing import Optional, Union

from voxreader.cursor import Buffer, ByteCursor
from voxreader.errors import BadMagicError, ChunkSizeError, UnknownChunkError
from voxreader.floats import decode_float32
from voxreader.model import (
    MATERIAL_PROPERTIES,
    Color,
    Frame,
    Material,
    MaterialType,
    Voxel,
)
from voxreader.source import fetch

logger = logging.getLogger(__name__)

MAGIC = "VOX "

UNKNOWN_CHUNK_POLICIES = ("skip", "error")


class ChunkHeader:
    """Chunk header class."""

    def __init__(self, id: bytes, content_size: int, children_size: int):
        self.id = id
        self.content_size = content_size
        self.children_size = children_size

    @classmethod
    def read(cls, cursor: ByteCursor) -> "ChunkHeader":
        """Read a chunk header from the given cursor."""
        id = cursor.read_bytes(4)
        content_size = cursor.read_uint32()
        children_size = cursor.read_uint32()
        return cls(id, content_size, children_size)

    def __repr__(self):
        return f"ChunkHeader({self.id!r}, {self.content_size}, {self.children_size})"


class VoxFile:
    """Everything decoded from a .vox file before assembly."""

    def __init__(self, version: int):
        self.version = version
        self.num_models: Optional[int] = None
        self.frames: list[Frame] = [Frame()]
        self.palette: list[Color] = []
        self.materials: list[Material] = []

    @property
    def current_frame(self) -> Frame:
        return self.frames[-1]

    def new_frame(self) -> Frame:
        """Start a new frame at the end of the animation."""
        frame = Frame()
        self.frames.append(frame)
        logger.debug("starting frame %d", len(self.frames) - 1)
        return frame

    @staticmethod
    def parse(
        buffer: Buffer, unknown_chunks: str = "skip", check_children: bool = True
    ) -> "VoxFile":
        """Parse a complete .vox file held in memory."""
        walker = ChunkWalker(unknown_chunks, check_children)
        return walker.walk(buffer)

    @staticmethod
    def read(
        locator: Union[str, os.PathLike],
        timeout: float = 30,
        unknown_chunks: str = "skip",
        check_children: bool = True,
    ) -> "VoxFile":
        """Read a .vox file from the given path or URL."""
        return VoxFile.parse(fetch(locator, timeout), unknown_chunks, check_children)


class Chunk:
    """Chunk class.

    Subclasses decode the content of one chunk type. `read` is handed a
    cursor bounded to the chunk content and applies what it decodes to the
    VoxFile being built.
    """

    id = b""

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        raise NotImplementedError


class MainChunk(Chunk):
    """Main chunk class.

    Chunk 'MAIN'
    {
        // pack of models
        Chunk 'PACK'    : optional

        // models
        Chunk 'SIZE'
        Chunk 'XYZI'

        Chunk 'SIZE'
        Chunk 'XYZI'

        ...

        // palette
        Chunk 'RGBA'    : optional

        // materials
        Chunk 'MATT'    : optional, repeated
    }

    The main chunk has no content of its own.
    """

    id = b"MAIN"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        pass


class PackChunk(Chunk):
    """Pack chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | numModels : num of SIZE and XYZI chunks
    -------------------------------------------------------------------------------
    """

    id = b"PACK"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        voxfile.num_models = cursor.read_uint32()
        logger.debug("pack of %d models", voxfile.num_models)


class SizeChunk(Chunk):
    """Size chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | size x
    4        | int        | size y
    4        | int        | size z : gravity direction
    -------------------------------------------------------------------------------

    A SIZE chunk fills the current frame, or starts a new one if the current
    frame already has a size.
    """

    id = b"SIZE"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        x = cursor.read_uint32()
        y = cursor.read_uint32()
        z = cursor.read_uint32()

        frame = voxfile.current_frame
        if frame.size is not None:
            frame = voxfile.new_frame()
        frame.size = (x, y, z)


class XYZIChunk(Chunk):
    """XYZI chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | numVoxels (N)
    4 x N    | int        | (x, y, z, colorIndex) : 1 byte for each component
    -------------------------------------------------------------------------------

    An XYZI chunk fills the current frame, or starts a new one if the current
    frame already has voxels. This is independent of SIZE: SIZE, SIZE, XYZI,
    XYZI puts the first voxels into the first frame.
    """

    id = b"XYZI"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        num_voxels = cursor.read_uint32()

        frame = voxfile.current_frame
        if frame.voxels:
            frame = voxfile.new_frame()

        for _ in range(num_voxels):
            x = cursor.next()
            y = cursor.next()
            z = cursor.next()
            color_index = cursor.next()
            frame.voxels.append(Voxel(x, y, z, color_index))


class PaletteChunk(Chunk):
    """Palette chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type     | Value
    -------------------------------------------------------------------------------
    4 x 256  | int      | (R, G, B, A) : 1 byte for each component
                        | * <NOTICE>
                        | * color [0-254] are mapped to palette index [1-255]
    -------------------------------------------------------------------------------

    Colors are stored as read; the index shift is applied on assembly.
    """

    id = b"RGBA"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        for _ in range(256):
            r = cursor.next()
            g = cursor.next()
            b = cursor.next()
            a = cursor.next()
            voxfile.palette.append(Color(r, g, b, a))


class MaterialChunk(Chunk):
    """Material chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | id [1-255]
    4        | int        | material type
                          | 0 : diffuse
                          | 1 : metal
                          | 2 : glass
                          | 3 : emissive
    4        | float      | material weight
    4        | int        | property bits : set if value is saved in next section
                          | bit(0) : Plastic
                          | bit(1) : Roughness
                          | bit(2) : Specular
                          | bit(3) : IOR
                          | bit(4) : Attenuation
                          | bit(5) : Power
                          | bit(6) : Glow
                          | bit(7) : isTotalPower (*no value)
    4 * N    | float      | normalized property value : (0.0 - 1.0]
                          | * one for each bit set above, excluding isTotalPower
    -------------------------------------------------------------------------------
    """

    id = b"MATT"

    @classmethod
    def read(cls, cursor: ByteCursor, voxfile: VoxFile):
        material_id = cursor.read_uint32()
        raw_type = cursor.read_uint32()
        weight = decode_float32(cursor.read_uint32())
        property_bits = cursor.read_uint32()

        try:
            type = MaterialType(raw_type)
        except ValueError:
            logger.warning("material %d has unknown type %d", material_id, raw_type)
            type = raw_type

        properties = {}
        for bit, name in enumerate(MATERIAL_PROPERTIES):
            if property_bits & (1 << bit):
                properties[name] = decode_float32(cursor.read_uint32())

        logger.debug(
            "material %d: type=%r weight=%s properties=%r",
            material_id,
            type,
            weight,
            properties,
        )
        voxfile.materials.append(
            Material(material_id, type, weight, property_bits, properties)
        )


CHUNK_TYPES: dict[bytes, type[Chunk]] = {
    chunk.id: chunk
    for chunk in (
        MainChunk,
        PackChunk,
        SizeChunk,
        XYZIChunk,
        PaletteChunk,
        MaterialChunk,
    )
}


class ChunkWalker:
    """Walks the chunk tree of a .vox buffer.

    unknown_chunks decides what happens to chunk IDs without a decoder:
    "skip" steps over their content, "error" raises UnknownChunkError.

    With check_children, the children of a chunk are read from exactly the
    number of bytes the chunk header declares for them. Without it, the
    declared size is ignored and chunks are read until the buffer runs out.
    """

    def __init__(self, unknown_chunks: str = "skip", check_children: bool = True):
        if unknown_chunks not in UNKNOWN_CHUNK_POLICIES:
            raise ValueError(
                f"unknown_chunks must be one of {UNKNOWN_CHUNK_POLICIES}; "
                f"got {unknown_chunks!r}"
            )
        self.unknown_chunks = unknown_chunks
        self.check_children = check_children

    def walk(self, buffer: Buffer) -> VoxFile:
        """Decode a whole .vox buffer."""
        cursor = ByteCursor(buffer)

        magic = cursor.read_ascii(4)
        if magic != MAGIC:
            raise BadMagicError(magic)

        version = cursor.read_uint32()
        logger.info(".vox format version %d", version)

        voxfile = VoxFile(version)

        # chunks whose children are still being read, innermost last
        open_chunks: list[tuple[ChunkHeader, int, int]] = []

        while True:
            header = self.read_chunk(cursor, voxfile)
            if self.check_children:
                start = cursor.position
                open_chunks.append((header, start, start + header.children_size))

            while open_chunks and cursor.position >= open_chunks[-1][2]:
                header, start, end = open_chunks.pop()
                if cursor.position != end:
                    raise ChunkSizeError(
                        header.id, header.children_size, cursor.position - start
                    )

            # the MAIN chunk normally consumes the rest of the file
            if not open_chunks and not cursor.has_next():
                return voxfile

    def read_chunk(self, cursor: ByteCursor, voxfile: VoxFile) -> ChunkHeader:
        """Read one chunk header and decode its content."""
        header = ChunkHeader.read(cursor)
        logger.debug("chunk %r", header)

        content = cursor.sub_cursor(header.content_size)
        chunk = CHUNK_TYPES.get(header.id)
        if chunk is not None:
            chunk.read(content, voxfile)
        elif self.unknown_chunks == "error":
            raise UnknownChunkError(header.id)
        else:
            logger.debug(
                "skipping %d bytes of unknown chunk %r", header.content_size, header.id
            )

        return header
