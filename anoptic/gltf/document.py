"""Reading whole glTF documents into GltfElements."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .buffers import load_buffers
from .geometry import parse_materials, parse_meshes, parse_nodes, parse_scenes
from .keys import GltfKey, _match_key
from .model import GltfElements
from .resources import (
    parse_accessors,
    parse_buffer_views,
    parse_buffers,
    parse_images,
    parse_samplers,
    parse_textures,
)


class GltfError(Exception):
    """Raised when a glTF document cannot be read or decoded."""


# Collection key -> (glTF name, GltfElements attribute, parser)
_COLLECTIONS: Dict[GltfKey, Tuple[str, str, Callable[[List[Any]], list]]] = {
    GltfKey.SCENES: ("scenes", "scenes", parse_scenes),
    GltfKey.NODES: ("nodes", "nodes", parse_nodes),
    GltfKey.MATERIALS: ("materials", "materials", parse_materials),
    GltfKey.MESHES: ("meshes", "meshes", parse_meshes),
    GltfKey.TEXTURES: ("textures", "textures", parse_textures),
    GltfKey.IMAGES: ("images", "images", parse_images),
    GltfKey.ACCESSORS: ("accessors", "accessors", parse_accessors),
    GltfKey.BUFFERVIEWS: ("bufferViews", "buffer_views", parse_buffer_views),
    GltfKey.SAMPLERS: ("samplers", "samplers", parse_samplers),
    GltfKey.BUFFERS: ("buffers", "buffers", parse_buffers),
}


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise GltfError(f"invalid glTF JSON: {error}") from error


def _walk(value: Any) -> Iterator[Tuple[str, Any]]:
    """Yield every (key, value) pair of nested objects in document order."""
    if isinstance(value, dict):
        for key, item in value.items():
            yield key, item
            yield from _walk(item)
    elif isinstance(value, list):
        for item in value:
            yield from _walk(item)


def _size(value: Any) -> int:
    if isinstance(value, (list, dict)):
        return len(value)
    return 0


def count_elements(text: str) -> Dict[str, int]:
    """Return the size of each element collection named in ``text``.

    Every property anywhere in the document whose name hashes like a
    collection name is counted; a later occurrence replaces an earlier one.
    Raises GltfError if ``text`` is not valid JSON.
    """
    document = _decode(text)
    counts = {name: 0 for name, _, _ in _COLLECTIONS.values()}
    for key, value in _walk(document):
        kind = _match_key(key)
        if kind in _COLLECTIONS:
            counts[_COLLECTIONS[kind][0]] = _size(value)
    return counts


def parse_elements(text: str, elements: Optional[GltfElements] = None) -> GltfElements:
    """Fill ``elements`` (a new one if None) from the top-level collections of ``text``.

    Raises GltfError if ``text`` is not a JSON object.
    """
    document = _decode(text)
    if not isinstance(document, dict):
        raise GltfError("a glTF document must be a JSON object")
    if elements is None:
        elements = GltfElements()
    for key, value in document.items():
        kind = _match_key(key)
        if kind in _COLLECTIONS and isinstance(value, list):
            _, attribute, parser = _COLLECTIONS[kind]
            setattr(elements, attribute, parser(value))
    return elements


def read_gltf_file(path) -> str:
    """Return the text of the glTF file at ``path``; raise GltfError on failure."""
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise GltfError(f"failed to read glTF file {path}: {error}") from error


def load_gltf(path) -> GltfElements:
    """Read and parse a glTF file and load its buffers.

    Buffer URIs are resolved relative to the directory holding the file.
    """
    text = read_gltf_file(path)
    elements = parse_elements(text)
    load_buffers(elements, Path(path).parent)
    return elements