"""Human-readable listings of the contents of GltfElements."""

import sys
from typing import Iterable, Optional

from .keys import component_count
from .model import GltfElements, GltfPrimitive

SEPARATOR = "================"
_NULL_ELEMENTS = "GltfElements is NULL.\n"
_MAX_BOUNDS = 4


def _s(value: Optional[str]) -> str:
    return "(null)" if value is None else value


def _block(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines) + f"{SEPARATOR}\n"


def format_scenes(elements: Optional[GltfElements]) -> str:
    """List every scene with its name and root nodes."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total scenes: {len(elements.scenes)}"]
    for number, scene in enumerate(elements.scenes):
        lines += [
            f"Scene {number}:",
            f"  Name: {_s(scene.name)}",
            f"  Node Count: {scene.node_count}",
            "  Nodes: [" + ", ".join(str(node) for node in scene.nodes) + "]",
        ]
    return _block(lines)


def format_nodes(elements: Optional[GltfElements]) -> str:
    """List every node with its name, mesh and rotation."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total nodes: {len(elements.nodes)}"]
    for number, node in enumerate(elements.nodes):
        rotation = ", ".join(f"{value:f}" for value in node.rotation[:4])
        lines += [
            f"Node {number}:",
            f"  Name: {_s(node.name)}",
            f"  Mesh: {node.mesh}",
            f"  Rotation: ({rotation})",
        ]
    return _block(lines)


def format_materials(elements: Optional[GltfElements]) -> str:
    """List every material with its PBR parameters."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total materials: {len(elements.materials)}"]
    for number, material in enumerate(elements.materials):
        lines += [
            f"Material {number}:",
            f"  Name: {_s(material.name)}",
            f"  Double Sided: {'True' if material.double_sided else 'False'}",
            "  PBR Properties:",
            f"\tBase Color Texture: {material.pbr.base_color_texture}",
            f"\tMetallic Factor: {material.pbr.metallic_factor:f}",
            f"\tRoughness Factor: {material.pbr.roughness_factor:f}",
        ]
    return _block(lines)


def format_primitive(primitive: Optional[GltfPrimitive]) -> str:
    """List the accessor and material indices of a primitive."""
    if primitive is None:
        return "GltfPrimitive is NULL.\n"
    lines = [
        "  Primitive:",
        f"\tPosition: {primitive.position}",
        f"\tNormal: {primitive.normal}",
        f"\tTexcoord: {primitive.texcoord}",
        f"\tIndices: {primitive.indices}",
        f"\tMaterial: {primitive.material}",
    ]
    return "".join(f"{line}\n" for line in lines)


def format_meshes(elements: Optional[GltfElements]) -> str:
    """List every mesh with its primitive."""
    if elements is None:
        return _NULL_ELEMENTS
    parts = [f"Total meshes: {len(elements.meshes)}\n"]
    for number, mesh in enumerate(elements.meshes):
        parts.append(f"Mesh {number}:\n  Name: {_s(mesh.name)}\n")
        parts.append(format_primitive(mesh.primitives))
    parts.append(f"{SEPARATOR}\n")
    return "".join(parts)


def format_images(elements: Optional[GltfElements]) -> str:
    """List every image with its name, MIME type and URI."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total images: {len(elements.images)}"]
    for number, image in enumerate(elements.images):
        lines += [
            f"Image {number}:",
            f"  Name: {_s(image.name)}",
            f"  MIME Type: {_s(image.mime_type)}",
            f"  URI: {_s(image.uri)}",
        ]
    return _block(lines)


def format_textures(elements: Optional[GltfElements]) -> str:
    """List every texture with its sampler and source image."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total textures: {len(elements.textures)}"]
    for number, texture in enumerate(elements.textures):
        lines += [
            f"Texture {number}:",
            f"  Sampler: {texture.sampler}",
            f"  Source Image Index: {texture.source}",
        ]
    return _block(lines)


def format_accessors(elements: Optional[GltfElements]) -> str:
    """List every accessor with its bounds (at most four components)."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total accessors: {len(elements.accessors)}"]
    for number, accessor in enumerate(elements.accessors):
        shown = min(component_count(accessor.type), _MAX_BOUNDS)
        highest = "".join(f"{value:f} " for value in accessor.max[:shown])
        lowest = "".join(f"{value:f} " for value in accessor.min[:shown])
        lines += [
            f"Accessor {number}:",
            f"  Buffer View: {accessor.buffer_view}",
            f"  Component Type: {accessor.component_type}",
            f"  Count: {accessor.count}",
            f"  Type: {accessor.type}",
            f"  Max: [{highest}]",
            f"  Min: [{lowest}]",
        ]
    return _block(lines)


def format_buffer_views(elements: Optional[GltfElements]) -> str:
    """List every buffer view with its buffer, length and offset."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total buffer views: {len(elements.buffer_views)}"]
    for number, view in enumerate(elements.buffer_views):
        lines += [
            f"Buffer View {number}:",
            f"  Index: {view.buffer}",
            f"  Byte Length: {view.byte_length}",
            f"  Byte Offset: {view.byte_offset}",
        ]
    return _block(lines)


def format_samplers(elements: Optional[GltfElements]) -> str:
    """List every sampler with its filters."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total samplers: {len(elements.samplers)}"]
    for number, sampler in enumerate(elements.samplers):
        lines += [
            f"Sampler {number}:",
            f"  Magnification Filter: {sampler.mag_filter}",
            f"  Minification Filter: {sampler.min_filter}",
        ]
    return _block(lines)


def format_buffers(elements: Optional[GltfElements]) -> str:
    """List every buffer with its length, load state and URI."""
    if elements is None:
        return _NULL_ELEMENTS
    lines = [f"Total buffers: {len(elements.buffers)}"]
    for number, buffer in enumerate(elements.buffers):
        data = "NULL" if buffer.data is None else f"{len(buffer.data)} bytes"
        lines += [
            f"Buffer {number}:",
            f"  Index: {buffer.index}",
            f"  Byte Length: {buffer.byte_length}",
            f"  Data: {data}",
            f"  URI: {buffer.uri if buffer.uri is not None else 'NULL'}",
        ]
    return _block(lines)


def format_elements(elements: Optional[GltfElements]) -> str:
    """Return the listings of every collection, one after another."""
    if elements is None:
        return _NULL_ELEMENTS
    return "".join(
        (
            format_scenes(elements),
            format_nodes(elements),
            format_materials(elements),
            format_meshes(elements),
            format_images(elements),
            format_textures(elements),
            format_accessors(elements),
            format_buffer_views(elements),
            format_samplers(elements),
            format_buffers(elements),
        )
    )


def print_elements(elements: Optional[GltfElements], file=None) -> None:
    """Write :func:`format_elements` output to ``file`` (standard output by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(format_elements(elements))