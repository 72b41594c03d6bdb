import io

from anoptic.gltf.model import (
    GltfAccessor,
    GltfBuffer,
    GltfBufferView,
    GltfElements,
    GltfImage,
    GltfMaterial,
    GltfMesh,
    GltfNode,
    GltfPrimitive,
    GltfSampler,
    GltfScene,
    GltfTexture,
)
from anoptic.gltf.report import (
    SEPARATOR,
    format_accessors,
    format_buffer_views,
    format_buffers,
    format_elements,
    format_images,
    format_materials,
    format_meshes,
    format_nodes,
    format_primitive,
    format_samplers,
    format_scenes,
    format_textures,
    print_elements,
)


def _sample():
    return GltfElements(
        scenes=[GltfScene(name="Main", nodes=[0, 1])],
        nodes=[GltfNode(mesh=2, name="root")],
        materials=[GltfMaterial(double_sided=True, name="paint")],
        meshes=[GltfMesh(name="box", primitives=GltfPrimitive(position=4, indices=7))],
        textures=[GltfTexture(sampler=1, source=3)],
        images=[GltfImage(uri="tex.png")],
        accessors=[GltfAccessor(count=5, type="VEC2", max=[1.0, 2.0, 3.0, 4.0])],
        buffer_views=[GltfBufferView(buffer=1, byte_length=64, byte_offset=8)],
        samplers=[GltfSampler(mag_filter=9729, min_filter=9987)],
        buffers=[GltfBuffer(byte_length=12, data=b"x" * 12, uri="a.bin"), GltfBuffer()],
    )


def test_scenes_listing():
    lines = format_scenes(_sample()).splitlines()
    assert lines[0] == "Total scenes: 1"
    assert "  Name: Main" in lines
    assert "  Nodes: [0, 1]" in lines
    assert lines[-1] == SEPARATOR


def test_nodes_listing_shows_mesh_and_name():
    text = format_nodes(_sample())
    assert "  Name: root\n" in text
    assert "  Mesh: 2\n" in text
    assert text.endswith(SEPARATOR + "\n")


def test_missing_name_shown_as_null():
    text = format_nodes(GltfElements(nodes=[GltfNode()]))
    assert "  Name: (null)\n" in text


def test_materials_listing():
    text = format_materials(_sample())
    assert "  Double Sided: True\n" in text
    assert "  Name: paint\n" in text


def test_primitive_listing():
    text = format_primitive(GltfPrimitive(position=4, indices=7))
    assert text.startswith("  Primitive:\n")
    assert "\tPosition: 4\n" in text
    assert "\tIndices: 7\n" in text
    assert format_primitive(None) == "GltfPrimitive is NULL.\n"


def test_meshes_listing_includes_primitive():
    elements = _sample()
    text = format_meshes(elements)
    assert format_primitive(elements.meshes[0].primitives) in text
    assert "  Name: box\n" in text


def test_images_and_textures():
    assert "  URI: tex.png\n" in format_images(_sample())
    assert "  Source Image Index: 3\n" in format_textures(_sample())


def test_accessor_bounds_limited_by_type():
    text = format_accessors(_sample())
    assert "  Max: [1.000000 2.000000 ]\n" in text
    assert "  Type: VEC2\n" in text


def test_buffer_views_and_samplers():
    assert "  Byte Offset: 8\n" in format_buffer_views(_sample())
    assert "  Minification Filter: 9987\n" in format_samplers(_sample())


def test_buffers_listing():
    text = format_buffers(_sample())
    assert "  URI: a.bin\n" in text
    assert "  URI: NULL\n" in text
    assert text.count("Buffer ") == 2


def test_format_elements_concatenates_sections():
    elements = _sample()
    text = format_elements(elements)
    assert text.startswith(format_scenes(elements))
    assert text.endswith(format_buffers(elements))
    assert text.count(SEPARATOR) == 10


def test_none_elements():
    assert format_elements(None) == "GltfElements is NULL.\n"
    assert format_scenes(None) == format_elements(None)


def test_print_elements_writes_listing():
    elements = _sample()
    stream = io.StringIO()
    print_elements(elements, stream)
    assert stream.getvalue() == format_elements(elements)