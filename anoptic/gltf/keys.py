"""Key hashing and enumerations used when reading glTF documents."""

from enum import IntEnum
from typing import Optional

_UINT32_MASK = 0xFFFFFFFF


def key_hash(text: str) -> int:
    """Return the sum of the UTF-8 byte values of ``text``, wrapped to 32 bits.

    Anagrams share a hash. The GltfKey values are defined in terms of it.
    """
    return sum(text.encode("utf-8")) & _UINT32_MASK


class GltfKey(IntEnum):
    """Hashes of the glTF property names the parser recognises."""

    EMPTY = 0

    # asset
    ASSET = 544
    GENERATOR = 967
    VERSION = 774

    # scene
    SCENE = 526
    SCENES = 641
    NAME = 417
    NODES = 537

    # node
    MESH = 429
    ROTATION = 880
    TRANSLATION = 1199
    SCALE = 520

    # material
    MATERIALS = 962
    DOUBLESIDED = 1124
    OPACITYFACTOR = 1368
    PBRMETALLICROUGHNESS = 2093
    BASECOLORTEXTURE = 1675
    INDEX = 536
    METALLICFACTOR = 1450
    ROUGHNESSFACTOR = 1597

    # mesh
    MESHES = 645
    PRIMITIVES = 1100
    ATTRIBUTES = 1095
    POSITION = 629
    NORMAL = 457
    TEXCOORD_0 = 759
    INDICES = 735
    MATERIAL = 847

    # texture
    TEXTURES = 900
    SAMPLER = 756
    SOURCE = 657

    # image
    IMAGES = 630
    MIMETYPE = 842
    URI = 336

    # accessor
    ACCESSORS = 966
    BUFFERVIEW = 1045
    COMPONENTTYPE = 1397
    COUNT = 553
    MAX = 326
    MIN = 324
    TYPE = 450

    # bufferView
    BUFFERVIEWS = 1160
    BUFFER = 634
    BYTEOFFSET = 1051
    BYTELENGTH = 1046

    # sampler
    SAMPLERS = 871
    MAGFILTER = 923
    MINFILTER = 938

    # buffer
    BUFFERS = 749
    BINARYDATA = 1023


class ComponentType(IntEnum):
    """Accessor component types."""

    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125
    FLOAT = 5126


class DataType(IntEnum):
    """Accessor element shapes."""

    SCALAR = 0
    VEC2 = 1
    VEC3 = 2
    VEC4 = 3
    MAT2 = 4
    MAT3 = 5
    MAT4 = 6


_COMPONENT_COUNTS = {
    "SCALAR": 1,
    "VEC2": 2,
    "VEC3": 3,
    "VEC4": 4,
    "MAT2": 4,
    "MAT3": 9,
    "MAT4": 16,
}


def component_count(type_name: str) -> int:
    """Return the number of components in an accessor type, or 0 if unknown."""
    return _COMPONENT_COUNTS.get(type_name, 0)


def _match_key(text: str) -> Optional[GltfKey]:
    """Return the GltfKey whose hash equals that of ``text``, if any."""
    try:
        return GltfKey(key_hash(text))
    except ValueError:
        return None