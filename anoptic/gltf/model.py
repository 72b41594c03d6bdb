"""Data classes describing the elements of a glTF document."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


def _four_zeros() -> List[float]:
    return [0.0, 0.0, 0.0, 0.0]


@dataclass
class GltfBuffer:
    """A binary buffer, with its contents once loaded."""

    index: int = 0
    byte_length: int = 0
    data: Optional[bytes] = None
    uri: Optional[str] = None


@dataclass
class GltfSampler:
    """Texture filtering settings."""

    mag_filter: int = 0
    min_filter: int = 0


@dataclass
class GltfBufferView:
    """A slice of a buffer."""

    buffer: int = 0
    byte_length: int = 0
    byte_offset: int = 0


@dataclass
class GltfAccessor:
    """A typed view into a buffer view."""

    buffer_view: int = 0
    component_type: int = 0
    count: int = 0
    max: List[float] = field(default_factory=_four_zeros)
    min: List[float] = field(default_factory=_four_zeros)
    type: str = ""


@dataclass
class GltfImage:
    """An image referenced by textures."""

    mime_type: Optional[str] = None
    name: Optional[str] = None
    uri: Optional[str] = None


@dataclass
class GltfTexture:
    """A texture: an image source and a sampler."""

    sampler: int = 0
    source: int = 0


@dataclass
class GltfPrimitive:
    """Accessor and material indices of a mesh primitive."""

    position: int = 0
    normal: int = 0
    texcoord: int = 0
    indices: int = 0
    material: int = 0


@dataclass
class GltfMesh:
    """A named mesh with its primitive."""

    name: Optional[str] = None
    primitives: GltfPrimitive = field(default_factory=GltfPrimitive)


@dataclass
class PbrMetallicRoughness:
    """Metallic-roughness material parameters."""

    base_color_texture: int = 0
    metallic_factor: float = 0.0
    roughness_factor: float = 0.0


@dataclass
class GltfMaterial:
    """A material."""

    double_sided: bool = False
    name: Optional[str] = None
    pbr: PbrMetallicRoughness = field(default_factory=PbrMetallicRoughness)


@dataclass
class GltfNode:
    """A scene node referring to a mesh."""

    mesh: int = 0
    name: Optional[str] = None
    rotation: List[float] = field(default_factory=_four_zeros)


@dataclass
class GltfScene:
    """A scene listing its root nodes."""

    name: Optional[str] = None
    nodes: List[int] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)


@dataclass
class GltfElements:
    """Every top-level element collection of a glTF document."""

    scenes: List[GltfScene] = field(default_factory=list)
    nodes: List[GltfNode] = field(default_factory=list)
    materials: List[GltfMaterial] = field(default_factory=list)
    meshes: List[GltfMesh] = field(default_factory=list)
    textures: List[GltfTexture] = field(default_factory=list)
    images: List[GltfImage] = field(default_factory=list)
    accessors: List[GltfAccessor] = field(default_factory=list)
    buffer_views: List[GltfBufferView] = field(default_factory=list)
    samplers: List[GltfSampler] = field(default_factory=list)
    buffers: List[GltfBuffer] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        """Return the number of elements in each collection, by glTF name."""
        return {
            "scenes": len(self.scenes),
            "nodes": len(self.nodes),
            "materials": len(self.materials),
            "meshes": len(self.meshes),
            "textures": len(self.textures),
            "images": len(self.images),
            "accessors": len(self.accessors),
            "bufferViews": len(self.buffer_views),
            "samplers": len(self.samplers),
            "buffers": len(self.buffers),
        }