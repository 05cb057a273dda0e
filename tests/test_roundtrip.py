"""Randomized round-trip tests: parsed output keys match non-default fields.

Each builder sets a random subset of fields to non-default values and
records the JSON keys it expects; the parsed output must contain exactly
those keys plus the mandatory ones.
"""

from __future__ import annotations

import json
import random
from typing import Any

import pytest

from gltfdoc.boundary.channel import ExportChannel
from gltfdoc.errors import ErrorCode
from gltfdoc.models import (
    Accessor,
    AccessorType,
    AlphaMode,
    Asset,
    Attributes,
    Buffer,
    BufferView,
    Color4,
    ComponentType,
    Document,
    Material,
    Mesh,
    Mode,
    Node,
    PbrMetallicRoughness,
    Primitive,
    Rotation,
    Scale,
    Scene,
    Target,
    Translation,
)
from gltfdoc.serialization.encoder import measure, to_bytes

SEEDS = list(range(25))

_ATTRIBUTE_KEYS = {
    "color_0": "COLOR_0",
    "joints_0": "JOINTS_0",
    "normal": "NORMAL",
    "position": "POSITION",
    "tangent": "TANGENT",
    "texcoord_0": "TEXCOORD_0",
    "texcoord_1": "TEXCOORD_1",
    "texcoord_2": "TEXCOORD_2",
    "texcoord_3": "TEXCOORD_3",
    "weights_0": "WEIGHTS_0",
}


# ---------------------------------------------------------------------------
# Random builders — each returns (entity, expected JSON tree shape)
# ---------------------------------------------------------------------------
#
# The expected shape is a dict mapping each expected key to either None
# (leaf, only presence is checked) or a nested expected shape / list of
# shapes for object-valued fields.


def _coin(rng: random.Random) -> bool:
    return rng.random() < 0.5


def _name(rng: random.Random, prefix: str) -> str:
    return f"{prefix}_{rng.randint(0, 999)}"


def _random_asset(rng: random.Random) -> tuple[Asset, dict[str, Any]]:
    asset = Asset(generator="", min_version="")
    expected: dict[str, Any] = {"version": None}
    if _coin(rng):
        asset.copyright = _name(rng, "owner")
        expected["copyright"] = None
    if _coin(rng):
        asset.generator = _name(rng, "tool")
        expected["generator"] = None
    if _coin(rng):
        asset.version = ""
    if _coin(rng):
        asset.min_version = "2.0"
        expected["minVersion"] = None
    return asset, expected


def _random_scene(rng: random.Random) -> tuple[Scene, dict[str, Any]]:
    scene = Scene()
    expected: dict[str, Any] = {}
    if _coin(rng):
        scene.name = _name(rng, "scene")
        expected["name"] = None
    if _coin(rng):
        scene.nodes = [rng.randint(0, 9) for _ in range(rng.randint(1, 4))]
        expected["nodes"] = None
    return scene, expected


def _random_node(rng: random.Random) -> tuple[Node, dict[str, Any]]:
    node = Node()
    expected: dict[str, Any] = {}
    if _coin(rng):
        node.name = _name(rng, "node")
        expected["name"] = None
    if _coin(rng):
        node.mesh = rng.randint(0, 3)
        expected["mesh"] = None
    if _coin(rng):
        node.translation = Translation(x=rng.uniform(0.5, 5.0), z=rng.uniform(-5.0, 5.0))
        expected["translation"] = None
    if _coin(rng):
        node.rotation = Rotation(y=rng.uniform(0.1, 1.0), w=rng.uniform(0.0, 0.9))
        expected["rotation"] = None
    if _coin(rng):
        node.scale = Scale(x=rng.uniform(1.5, 3.0))
        expected["scale"] = None
    if _coin(rng):
        node.children = [rng.randint(0, 9)]
        expected["children"] = None
    return node, expected


def _random_material(rng: random.Random) -> tuple[Material, dict[str, Any]]:
    material = Material()
    pbr = PbrMetallicRoughness()
    pbr_expected: dict[str, Any] = {}
    expected: dict[str, Any] = {"pbrMetallicRoughness": pbr_expected}
    if _coin(rng):
        material.name = _name(rng, "material")
        expected["name"] = None
    if _coin(rng):
        material.emissive_factor = (rng.uniform(0.1, 1.0), 0.0, 0.0)
        expected["emissiveFactor"] = None
    if _coin(rng):
        material.alpha_mode = rng.choice([AlphaMode.MASK, AlphaMode.BLEND])
        expected["alphaMode"] = None
    if _coin(rng):
        material.alpha_cutoff = rng.choice([0.0, 0.25, 0.75, 1.0])
        expected["alphaCutoff"] = None
    if _coin(rng):
        material.double_sided = True
        expected["doubleSided"] = None
    if _coin(rng):
        pbr.base_color_factor = Color4(g=rng.uniform(0.0, 0.9))
        pbr_expected["baseColorFactor"] = None
    if _coin(rng):
        pbr.metallic_factor = rng.uniform(0.0, 0.9)
        pbr_expected["metallicFactor"] = None
    if _coin(rng):
        pbr.roughness_factor = rng.uniform(0.0, 0.9)
        pbr_expected["roughnessFactor"] = None
    material.pbr_metallic_roughness = pbr
    return material, expected


def _random_primitive(rng: random.Random) -> tuple[Primitive, dict[str, Any]]:
    attributes = Attributes()
    attributes_expected: dict[str, Any] = {}
    for attr, key in _ATTRIBUTE_KEYS.items():
        if _coin(rng):
            setattr(attributes, attr, rng.randint(0, 9))
            attributes_expected[key] = None
    primitive = Primitive(attributes=attributes)
    expected: dict[str, Any] = {"attributes": attributes_expected}
    if _coin(rng):
        primitive.indices = rng.randint(0, 9)
        expected["indices"] = None
    if _coin(rng):
        primitive.material = rng.randint(0, 3)
        expected["material"] = None
    if _coin(rng):
        primitive.mode = rng.choice([m for m in Mode if m is not Mode.TRIANGLES])
        expected["mode"] = None
    return primitive, expected


def _random_mesh(rng: random.Random) -> tuple[Mesh, dict[str, Any]]:
    mesh = Mesh()
    primitives = [_random_primitive(rng) for _ in range(rng.randint(0, 3))]
    mesh.primitives = [p for p, _ in primitives]
    expected: dict[str, Any] = {"primitives": [e for _, e in primitives]}
    if _coin(rng):
        mesh.name = _name(rng, "mesh")
        expected["name"] = None
    if _coin(rng):
        mesh.weights = [rng.random() for _ in range(rng.randint(1, 3))]
        expected["weights"] = None
    return mesh, expected


def _random_accessor(rng: random.Random) -> tuple[Accessor, dict[str, Any]]:
    accessor = Accessor(
        component_type=rng.choice(list(ComponentType)),
        count=rng.randint(0, 1000),
        type=rng.choice(list(AccessorType)),
    )
    expected: dict[str, Any] = {"componentType": None, "count": None, "type": None}
    if _coin(rng):
        accessor.name = _name(rng, "accessor")
        expected["name"] = None
    if _coin(rng):
        accessor.buffer_view = rng.randint(0, 5)
        expected["bufferView"] = None
    if _coin(rng):
        accessor.byte_offset = rng.randint(1, 4096)
        expected["byteOffset"] = None
    if _coin(rng):
        accessor.normalized = True
        expected["normalized"] = None
    if _coin(rng):
        accessor.max = [rng.uniform(0.0, 10.0)]
        expected["max"] = None
    if _coin(rng):
        accessor.min = [rng.uniform(-10.0, 0.0)]
        expected["min"] = None
    return accessor, expected


def _random_buffer_view(rng: random.Random) -> tuple[BufferView, dict[str, Any]]:
    view = BufferView(
        buffer=rng.randint(0, 2),
        byte_length=rng.randint(0, 4096),
        byte_offset=rng.choice([0, rng.randint(1, 4096)]),
    )
    expected: dict[str, Any] = {"buffer": None, "byteLength": None, "byteOffset": None}
    if _coin(rng):
        view.name = _name(rng, "view")
        expected["name"] = None
    if _coin(rng):
        view.byte_stride = rng.choice([4, 8, 12, 16])
        expected["byteStride"] = None
    if _coin(rng):
        view.target = rng.choice(list(Target))
        expected["target"] = None
    return view, expected


def _random_buffer(rng: random.Random) -> tuple[Buffer, dict[str, Any]]:
    buffer = Buffer(byte_length=rng.randint(0, 65536))
    expected: dict[str, Any] = {"byteLength": None}
    if _coin(rng):
        buffer.name = _name(rng, "buffer")
        expected["name"] = None
    if _coin(rng):
        buffer.uri = f"{_name(rng, 'data')}.bin"
        expected["uri"] = None
    return buffer, expected


def _random_list(rng, builder) -> tuple[list, list[dict[str, Any]]]:
    pairs = [builder(rng) for _ in range(rng.randint(0, 3))]
    return [e for e, _ in pairs], [x for _, x in pairs]


def _random_document(rng: random.Random) -> tuple[Document, dict[str, Any]]:
    asset, asset_expected = _random_asset(rng)
    doc = Document(asset=asset)
    expected: dict[str, Any] = {"asset": asset_expected}
    if _coin(rng):
        doc.scene = rng.randint(0, 2)
        expected["scene"] = None

    for attr, key, builder in (
        ("scenes", "scenes", _random_scene),
        ("nodes", "nodes", _random_node),
        ("materials", "materials", _random_material),
        ("meshes", "meshes", _random_mesh),
        ("accessors", "accessors", _random_accessor),
        ("buffer_views", "bufferViews", _random_buffer_view),
        ("buffers", "buffers", _random_buffer),
    ):
        entities, shapes = _random_list(rng, builder)
        setattr(doc, attr, entities)
        if entities:
            expected[key] = shapes
    return doc, expected


def _assert_shape(actual: Any, expected: dict[str, Any], path: str = "$") -> None:
    assert isinstance(actual, dict), path
    assert set(actual) == set(expected), f"{path}: {sorted(actual)} != {sorted(expected)}"
    for key, sub in expected.items():
        if sub is None:
            continue
        if isinstance(sub, list):
            assert len(actual[key]) == len(sub), f"{path}.{key}"
            for i, item in enumerate(sub):
                _assert_shape(actual[key][i], item, f"{path}.{key}[{i}]")
        else:
            _assert_shape(actual[key], sub, f"{path}.{key}")


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_keys_are_exactly_the_non_default_fields(self, seed: int):
        doc, expected = _random_document(random.Random(seed))
        _assert_shape(json.loads(to_bytes(doc)), expected)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_reported_size_matches_measurement(self, seed: int):
        doc, _ = _random_document(random.Random(seed))
        channel = ExportChannel()
        assert channel.export(doc) == ErrorCode.NONE
        assert channel.size == measure(doc) == len(channel.result.buffer)
        assert channel.result_bytes() == to_bytes(doc)

    @pytest.mark.parametrize("seed", SEEDS[:5])
    def test_values_survive_parsing(self, seed: int):
        rng = random.Random(seed)
        nodes = [_random_node(rng)[0] for _ in range(4)]
        parsed = json.loads(to_bytes(Document(nodes=nodes)))
        for node, out in zip(nodes, parsed["nodes"]):
            if "translation" in out:
                assert out["translation"] == node.translation.to_list()
            if "rotation" in out:
                assert out["rotation"] == node.rotation.to_list()
            if "scale" in out:
                assert out["scale"] == node.scale.to_list()
