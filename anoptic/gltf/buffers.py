"""Loading of glTF buffer contents and reading of vertex and index data."""

import struct
from pathlib import Path
from typing import List, Optional, Tuple

from .keys import ComponentType
from .model import GltfAccessor, GltfElements, GltfMesh

DEFAULT_COLOR: Tuple[float, float, float] = (0.5, 0.5, 0.5)
"""Colour given to every vertex built by :func:`mesh_vertices`."""

Vertex = Tuple[Tuple[float, float, float], Tuple[float, float], Tuple[float, float, float]]

_VEC3 = struct.Struct("<3f")
_VEC2 = struct.Struct("<2f")
_INDEX_FORMATS = {
    ComponentType.UNSIGNED_BYTE: struct.Struct("<B"),
    ComponentType.UNSIGNED_SHORT: struct.Struct("<H"),
    ComponentType.UNSIGNED_INT: struct.Struct("<I"),
}


def read_file(path) -> bytes:
    """Return the whole contents of the file at ``path``."""
    with open(path, "rb") as handle:
        return handle.read()


def load_buffers(elements: GltfElements, base_dir=None) -> int:
    """Read the file behind every buffer that has a URI.

    A buffer receives its data only when the file can be read and its size
    matches the declared byte length; other buffers are left unloaded.
    Returns the number of buffers loaded.
    """
    root = Path(base_dir) if base_dir is not None else None
    loaded = 0
    for buffer in elements.buffers:
        if buffer.uri is None:
            continue
        path = root / buffer.uri if root is not None else Path(buffer.uri)
        try:
            data = read_file(path)
        except OSError:
            continue
        if len(data) == buffer.byte_length:
            buffer.data = data
            loaded += 1
    return loaded


def buffer_data(elements: GltfElements, buffer_view_index: int) -> bytes:
    """Return the bytes of a buffer from the start of the given buffer view."""
    view = elements.buffer_views[buffer_view_index]
    buffer = elements.buffers[view.buffer]
    if buffer.data is None:
        raise ValueError(f"buffer {view.buffer} has not been loaded")
    return buffer.data[view.byte_offset:]


def _unpack(layout: struct.Struct, data: bytes, index: int) -> tuple:
    offset = index * layout.size
    if index < 0 or offset + layout.size > len(data):
        raise IndexError(f"element {index} lies outside the buffer data")
    return layout.unpack_from(data, offset)


def position_at(
    elements: GltfElements, accessor: GltfAccessor, index: int
) -> Optional[Tuple[float, float, float]]:
    """Return the position at ``index``, or None unless components are floats."""
    data = buffer_data(elements, accessor.buffer_view)
    if accessor.component_type != ComponentType.FLOAT:
        return None
    return _unpack(_VEC3, data, index)


def texcoord_at(
    elements: GltfElements, accessor: GltfAccessor, index: int
) -> Optional[Tuple[float, float]]:
    """Return the texture coordinate at ``index``, or None unless components are floats."""
    data = buffer_data(elements, accessor.buffer_view)
    if accessor.component_type != ComponentType.FLOAT:
        return None
    return _unpack(_VEC2, data, index)


def index_at(elements: GltfElements, accessor: GltfAccessor, index: int) -> Optional[int]:
    """Return the vertex index at ``index`` as a 16-bit value.

    Returns None for component types other than unsigned byte, short or int;
    32-bit indices are truncated to 16 bits.
    """
    data = buffer_data(elements, accessor.buffer_view)
    layout = _INDEX_FORMATS.get(accessor.component_type)
    if layout is None:
        return None
    (value,) = _unpack(layout, data, index)
    return value & 0xFFFF


def mesh_vertices(elements: GltfElements, mesh: GltfMesh) -> List[Vertex]:
    """Combine positions and texture coordinates of a mesh into vertices.

    Each vertex is ``(position, texcoord, color)`` with DEFAULT_COLOR.
    """
    primitive = mesh.primitives
    positions = elements.accessors[primitive.position]
    texcoords = elements.accessors[primitive.texcoord]
    vertices = []
    for number in range(positions.count):
        position = position_at(elements, positions, number)
        texcoord = texcoord_at(elements, texcoords, number)
        if position is None or texcoord is None:
            raise ValueError("vertex attributes must have float components")
        vertices.append((position, texcoord, DEFAULT_COLOR))
    return vertices


def mesh_indices(elements: GltfElements, mesh: GltfMesh) -> List[int]:
    """Return the 16-bit vertex indices of a mesh."""
    accessor = elements.accessors[mesh.primitives.indices]
    indices = []
    for number in range(accessor.count):
        value = index_at(elements, accessor, number)
        if value is None:
            raise ValueError(
                f"unsupported index component type {accessor.component_type}"
            )
        indices.append(value)
    return indices