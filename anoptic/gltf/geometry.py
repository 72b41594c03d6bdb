"""Parsing of scenes, nodes, materials and meshes from decoded glTF JSON.

Properties are recognised by the hash of their name, so any name with the
same hash as a known property is treated as that property.
"""

import json
import re
from typing import Any, Iterable, List, Optional

from .keys import GltfKey, _match_key
from .model import (
    GltfMaterial,
    GltfMesh,
    GltfNode,
    GltfPrimitive,
    GltfScene,
    PbrMetallicRoughness,
)

_UINT32_MASK = 0xFFFFFFFF
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _as_int(value: Any) -> int:
    """Read a leading integer from a JSON value; 0 when there is none."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group()) if match else 0
    return 0


def _as_u32(value: Any) -> int:
    return _as_int(value) & _UINT32_MASK


def _as_float(value: Any) -> float:
    """Read a leading number from a JSON value; 0.0 when there is none."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        return float(match.group()) if match else 0.0
    return 0.0


def _text(value: Any) -> str:
    """Return a string value as is, any other value as its JSON text."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def parse_scenes(items: Iterable[Any]) -> List[GltfScene]:
    """Build a scene from every entry of a ``scenes`` array."""
    scenes = []
    for item in items:
        scene = GltfScene()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.NAME:
                    scene.name = _text(value)
                elif kind is GltfKey.NODES and isinstance(value, list):
                    scene.nodes = [_as_u32(node) for node in value]
        scenes.append(scene)
    return scenes


def parse_nodes(items: Iterable[Any]) -> List[GltfNode]:
    """Build a node from every entry of a ``nodes`` array."""
    nodes = []
    for item in items:
        node = GltfNode()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.MESH:
                    node.mesh = _as_u32(value)
                elif kind is GltfKey.NAME:
                    node.name = _text(value)
                elif kind is GltfKey.ROTATION and isinstance(value, list):
                    for slot, component in enumerate(value[:4]):
                        node.rotation[slot] = _as_float(component)
        nodes.append(node)
    return nodes


def parse_pbr(obj: Any) -> PbrMetallicRoughness:
    """Read a ``pbrMetallicRoughness`` object."""
    if not isinstance(obj, dict):
        raise TypeError(f"pbrMetallicRoughness must be an object, got {type(obj).__name__}")
    pbr = PbrMetallicRoughness()
    for key, value in obj.items():
        kind = _match_key(key)
        if kind is GltfKey.BASECOLORTEXTURE:
            if isinstance(value, dict):
                for inner_key, inner_value in value.items():
                    if _match_key(inner_key) is GltfKey.INDEX:
                        pbr.base_color_texture = _as_u32(inner_value)
        elif kind is GltfKey.METALLICFACTOR:
            pbr.metallic_factor = _as_float(value)
        elif kind is GltfKey.ROUGHNESSFACTOR:
            pbr.roughness_factor = _as_float(value)
    return pbr


def _is_true(value: Any) -> bool:
    return value is True or (isinstance(value, str) and value.startswith("true"))


def parse_materials(items: Iterable[Any]) -> List[GltfMaterial]:
    """Build a material from every entry of a ``materials`` array."""
    materials = []
    for item in items:
        material = GltfMaterial()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.DOUBLESIDED:
                    material.double_sided = _is_true(value)
                elif kind is GltfKey.NAME:
                    material.name = _text(value)
                elif kind is GltfKey.PBRMETALLICROUGHNESS and isinstance(value, dict):
                    material.pbr = parse_pbr(value)
        materials.append(material)
    return materials


def parse_primitive(obj: Any, primitive: Optional[GltfPrimitive] = None) -> GltfPrimitive:
    """Read a primitive object into ``primitive`` (a new one if None) and return it.

    Properties absent from ``obj`` keep their current values.
    """
    if not isinstance(obj, dict):
        raise TypeError(f"primitive must be an object, got {type(obj).__name__}")
    if primitive is None:
        primitive = GltfPrimitive()
    for key, value in obj.items():
        if key == "attributes" and isinstance(value, dict):
            for attribute, index in value.items():
                kind = _match_key(attribute)
                if kind is GltfKey.POSITION:
                    primitive.position = _as_u32(index)
                elif kind is GltfKey.NORMAL:
                    primitive.normal = _as_u32(index)
                elif kind is GltfKey.TEXCOORD_0:
                    primitive.texcoord = _as_u32(index)
            continue
        kind = _match_key(key)
        if kind is GltfKey.INDICES:
            primitive.indices = _as_u32(value)
        elif kind is GltfKey.MATERIAL:
            primitive.material = _as_u32(value)
    return primitive


def parse_meshes(items: Iterable[Any]) -> List[GltfMesh]:
    """Build a mesh from every entry of a ``meshes`` array.

    All primitives of a mesh are read into its single primitive record,
    later ones overriding earlier ones.
    """
    meshes = []
    for item in items:
        mesh = GltfMesh()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.NAME:
                    mesh.name = _text(value)
                elif kind is GltfKey.PRIMITIVES and isinstance(value, list):
                    for entry in value:
                        if isinstance(entry, dict):
                            parse_primitive(entry, mesh.primitives)
        meshes.append(mesh)
    return meshes