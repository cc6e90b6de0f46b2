"""Helpers for building .vox files in tests."""


def int32(value: int) -> bytes:
    return value.to_bytes(4, "little")


def chunk(id: bytes, content: bytes = b"", children: bytes = b"") -> bytes:
    return id + int32(len(content)) + int32(len(children)) + content + children


def vox(*children: bytes, version: int = 150) -> bytes:
    return b"VOX " + int32(version) + chunk(b"MAIN", b"", b"".join(children))


def size_chunk(x: int, y: int, z: int) -> bytes:
    return chunk(b"SIZE", int32(x) + int32(y) + int32(z))


def xyzi_chunk(voxels) -> bytes:
    content = int32(len(voxels))
    for voxel in voxels:
        content += bytes(voxel)
    return chunk(b"XYZI", content)


def rgba_chunk(colors) -> bytes:
    return chunk(b"RGBA", b"".join(bytes(color) for color in colors))


def matt_chunk(material_id: int, type: int, weight: int, bits: int, values=()) -> bytes:
    content = int32(material_id) + int32(type) + int32(weight) + int32(bits)
    for value in values:
        content += int32(value)
    return chunk(b"MATT", content)
