"""Parsing of textures, images, accessors, buffer views, samplers and buffers.

Properties are recognised by the hash of their name, so any name with the
same hash as a known property is treated as that property.
"""

from typing import Any, Iterable, List

from .geometry import _as_float, _as_int, _as_u32, _text
from .keys import GltfKey, _match_key
from .model import (
    GltfAccessor,
    GltfBuffer,
    GltfBufferView,
    GltfImage,
    GltfSampler,
    GltfTexture,
)

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_ACCESSOR_BOUNDS = 4
_ACCESSOR_TYPE_MAX = 6


def _as_u64(value: Any) -> int:
    return _as_int(value) & _UINT64_MASK


def parse_textures(items: Iterable[Any]) -> List[GltfTexture]:
    """Build a texture from every entry of a ``textures`` array."""
    textures = []
    for item in items:
        texture = GltfTexture()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.SAMPLER:
                    texture.sampler = _as_u32(value)
                elif kind is GltfKey.SOURCE:
                    texture.source = _as_u32(value)
        textures.append(texture)
    return textures


def parse_images(items: Iterable[Any]) -> List[GltfImage]:
    """Build an image from every entry of an ``images`` array."""
    images = []
    for item in items:
        image = GltfImage()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.MIMETYPE:
                    image.mime_type = _text(value)
                elif kind is GltfKey.NAME:
                    image.name = _text(value)
                elif kind is GltfKey.URI:
                    image.uri = _text(value)
        images.append(image)
    return images


def _bounds(values: List[Any], target: List[float]) -> None:
    for slot, component in enumerate(values[:_ACCESSOR_BOUNDS]):
        target[slot] = _as_float(component)


def parse_accessors(items: Iterable[Any]) -> List[GltfAccessor]:
    """Build an accessor from every entry of an ``accessors`` array.

    At most four ``max``/``min`` components are kept and the type name is
    cut to six characters.
    """
    accessors = []
    for item in items:
        accessor = GltfAccessor()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.BUFFERVIEW:
                    accessor.buffer_view = _as_u32(value)
                elif kind is GltfKey.COMPONENTTYPE:
                    accessor.component_type = _as_u32(value)
                elif kind is GltfKey.COUNT:
                    accessor.count = _as_u32(value)
                elif kind is GltfKey.MAX and isinstance(value, list):
                    _bounds(value, accessor.max)
                elif kind is GltfKey.MIN and isinstance(value, list):
                    _bounds(value, accessor.min)
                elif kind is GltfKey.TYPE:
                    accessor.type = _text(value)[:_ACCESSOR_TYPE_MAX]
        accessors.append(accessor)
    return accessors


def parse_buffer_views(items: Iterable[Any]) -> List[GltfBufferView]:
    """Build a buffer view from every entry of a ``bufferViews`` array."""
    views = []
    for item in items:
        view = GltfBufferView()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.BUFFER:
                    view.buffer = _as_u32(value)
                elif kind is GltfKey.BYTELENGTH:
                    view.byte_length = _as_u64(value)
                elif kind is GltfKey.BYTEOFFSET:
                    view.byte_offset = _as_u64(value)
        views.append(view)
    return views


def parse_samplers(items: Iterable[Any]) -> List[GltfSampler]:
    """Build a sampler from every entry of a ``samplers`` array."""
    samplers = []
    for item in items:
        sampler = GltfSampler()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.MAGFILTER:
                    sampler.mag_filter = _as_u32(value)
                elif kind is GltfKey.MINFILTER:
                    sampler.min_filter = _as_u32(value)
        samplers.append(sampler)
    return samplers


def parse_buffers(items: Iterable[Any]) -> List[GltfBuffer]:
    """Build a buffer description from every entry of a ``buffers`` array.

    The contents are not read here; see :func:`anoptic.gltf.buffers.load_buffers`.
    """
    buffers = []
    for item in items:
        buffer = GltfBuffer()
        if isinstance(item, dict):
            for key, value in item.items():
                kind = _match_key(key)
                if kind is GltfKey.BYTELENGTH:
                    buffer.byte_length = _as_u64(value)
                elif kind is GltfKey.URI:
                    buffer.uri = _text(value)
        buffers.append(buffer)
    return buffers