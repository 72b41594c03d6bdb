from anoptic.gltf.model import (
    GltfAccessor,
    GltfElements,
    GltfMaterial,
    GltfMesh,
    GltfNode,
    GltfScene,
)


def test_empty_elements_have_zero_counts():
    counts = GltfElements().counts()
    assert set(counts.values()) == {0}
    assert list(counts) == [
        "scenes",
        "nodes",
        "materials",
        "meshes",
        "textures",
        "images",
        "accessors",
        "bufferViews",
        "samplers",
        "buffers",
    ]


def test_counts_follow_lists():
    elements = GltfElements()
    elements.scenes.append(GltfScene())
    elements.nodes.extend([GltfNode(), GltfNode()])
    counts = elements.counts()
    assert counts["scenes"] == 1
    assert counts["nodes"] == 2
    assert counts["meshes"] == 0


def test_default_lists_are_independent():
    first = GltfAccessor()
    second = GltfAccessor()
    first.max[0] = 5.0
    assert second.max == [0.0, 0.0, 0.0, 0.0]
    assert first.max[0] == 5.0


def test_scene_node_count():
    scene = GltfScene(name="s", nodes=[0, 1, 2])
    assert scene.node_count == len(scene.nodes)


def test_nested_defaults():
    mesh = GltfMesh()
    material = GltfMaterial()
    assert mesh.primitives.indices == 0
    assert material.pbr.metallic_factor == 0.0
    assert material.double_sided is False
    assert GltfNode().rotation == [0.0, 0.0, 0.0, 0.0]