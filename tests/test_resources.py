import pytest

from anoptic.gltf.model import (
    GltfAccessor,
    GltfBuffer,
    GltfBufferView,
    GltfImage,
    GltfSampler,
    GltfTexture,
)
from anoptic.gltf.resources import (
    parse_accessors,
    parse_buffer_views,
    parse_buffers,
    parse_images,
    parse_samplers,
    parse_textures,
)


def test_textures_read_sampler_and_source():
    textures = parse_textures([{"sampler": 2, "source": 7}, {"source": 3}])
    assert textures == [GltfTexture(sampler=2, source=7), GltfTexture(sampler=0, source=3)]


def test_textures_non_object_entry_gives_default():
    assert parse_textures([5]) == [GltfTexture()]


def test_images_read_strings():
    images = parse_images([{"mimeType": "image/png", "name": "albedo", "uri": "albedo.png"}])
    assert images == [GltfImage(mime_type="image/png", name="albedo", uri="albedo.png")]


def test_images_missing_fields_stay_none():
    (image,) = parse_images([{"uri": "a.png"}])
    assert image.name is None
    assert image.mime_type is None
    assert image.uri == "a.png"


def test_accessor_fields():
    (accessor,) = parse_accessors(
        [
            {
                "bufferView": 1,
                "componentType": 5126,
                "count": 24,
                "max": [1.5, 2.0, 3.25],
                "min": [-1.5, -2.0, -3.25],
                "type": "VEC3",
            }
        ]
    )
    assert accessor.buffer_view == 1
    assert accessor.component_type == 5126
    assert accessor.count == 24
    assert accessor.max == [1.5, 2.0, 3.25, 0.0]
    assert accessor.min == [-1.5, -2.0, -3.25, 0.0]
    assert accessor.type == "VEC3"


def test_accessor_bounds_keep_at_most_four():
    (accessor,) = parse_accessors([{"max": list(range(16)), "type": "MAT4"}])
    assert accessor.max == [0.0, 1.0, 2.0, 3.0]
    assert accessor.type == "MAT4"


def test_accessor_type_cut_to_six_characters():
    (accessor,) = parse_accessors([{"type": "SCALARX"}])
    assert accessor.type == "SCALAR"


def test_accessor_defaults_for_empty_object():
    assert parse_accessors([{}]) == [GltfAccessor()]


def test_buffer_views():
    views = parse_buffer_views(
        [{"buffer": 0, "byteLength": 288, "byteOffset": 0}, {"buffer": 1, "byteLength": 72, "byteOffset": 288}]
    )
    assert views == [
        GltfBufferView(buffer=0, byte_length=288, byte_offset=0),
        GltfBufferView(buffer=1, byte_length=72, byte_offset=288),
    ]


def test_buffer_view_large_lengths_survive():
    big = 2**40
    (view,) = parse_buffer_views([{"byteLength": big, "byteOffset": big + 1}])
    assert view.byte_length == big
    assert view.byte_offset == big + 1


def test_samplers():
    samplers = parse_samplers([{"magFilter": 9729, "minFilter": 9987}])
    assert samplers == [GltfSampler(mag_filter=9729, min_filter=9987)]


def test_buffers_read_length_and_uri_without_data():
    (buffer,) = parse_buffers([{"byteLength": 840, "uri": "model.bin"}])
    assert buffer == GltfBuffer(index=0, byte_length=840, data=None, uri="model.bin")


def test_unknown_keys_are_ignored():
    assert parse_samplers([{"wrapS": 10497}]) == [GltfSampler()]
    assert parse_buffers([{"name": "x"}]) == [GltfBuffer()]


@pytest.mark.parametrize(
    "parser",
    [parse_textures, parse_images, parse_accessors, parse_buffer_views, parse_samplers, parse_buffers],
)
def test_one_result_per_entry(parser):
    assert len(parser([{}, {}, "skip", {}])) == 4