"""Per-entity field tables.

For every entity type the table lists, in schema order, the attribute
name, the JSON key, the omission predicate and the encoding rule. The
encoder and the test-suite both read from :data:`FIELDS`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gltfdoc.models.document import (
    Accessor,
    Asset,
    Attributes,
    Buffer,
    BufferView,
    Document,
    Material,
    Mesh,
    Node,
    PbrMetallicRoughness,
    Primitive,
    Scene,
)
from gltfdoc.models.values import Color4, Rotation, Scale, Translation
from gltfdoc.serialization import omission
from gltfdoc.serialization.omission import Predicate


class Encoding(str, Enum):
    """How a field value is turned into a JSON value."""

    VALUE = "value"
    """String, number, bool, or list of numbers written as-is."""

    TAG = "tag"
    """Enumeration written as its string tag."""

    CODE = "code"
    """Enumeration written as its integer code."""

    VECTOR = "vector"
    """Tuple-like value type written as an array of its components."""

    OBJECT = "object"
    """Nested entity written as a JSON object."""

    OBJECT_LIST = "object_list"
    """List of nested entities written as an array of objects."""


@dataclass(frozen=True)
class FieldSpec:
    """One serialized field of an entity."""

    attr: str
    key: str
    omit: Predicate
    encoding: Encoding = Encoding.VALUE


def _field(
    attr: str,
    key: str | None = None,
    omit: Predicate = omission.never,
    encoding: Encoding = Encoding.VALUE,
) -> FieldSpec:
    return FieldSpec(attr=attr, key=key or attr, omit=omit, encoding=encoding)


def _name() -> FieldSpec:
    return _field("name", omit=omission.is_empty_string)


def _attribute(attr: str, key: str) -> FieldSpec:
    return _field(attr, key, omit=omission.is_none)


FIELDS: dict[type, tuple[FieldSpec, ...]] = {
    Asset: (
        _field("copyright", omit=omission.is_empty_string),
        _field("generator", omit=omission.is_empty_string),
        _field("version"),
        _field("min_version", "minVersion", omit=omission.is_empty_string),
    ),
    Scene: (
        _name(),
        _field("nodes", omit=omission.is_empty_list),
    ),
    Node: (
        _name(),
        _field("mesh", omit=omission.is_none),
        _field("translation", omit=omission.is_default_vector, encoding=Encoding.VECTOR),
        _field("rotation", omit=omission.is_default_vector, encoding=Encoding.VECTOR),
        _field("scale", omit=omission.is_default_vector, encoding=Encoding.VECTOR),
        _field("children", omit=omission.is_empty_list),
    ),
    PbrMetallicRoughness: (
        _field(
            "base_color_factor", "baseColorFactor",
            omit=omission.is_default_vector, encoding=Encoding.VECTOR,
        ),
        _field("metallic_factor", "metallicFactor", omit=omission.is_default_metallic_factor),
        _field("roughness_factor", "roughnessFactor", omit=omission.is_default_roughness_factor),
    ),
    Material: (
        _name(),
        _field("emissive_factor", "emissiveFactor", omit=omission.is_default_emissive_factor),
        _field(
            "alpha_mode", "alphaMode",
            omit=omission.is_default_alpha_mode, encoding=Encoding.TAG,
        ),
        _field("alpha_cutoff", "alphaCutoff", omit=omission.is_default_alpha_cutoff),
        _field("double_sided", "doubleSided", omit=omission.is_default_double_sided),
        _field("pbr_metallic_roughness", "pbrMetallicRoughness", encoding=Encoding.OBJECT),
    ),
    Attributes: (
        _attribute("color_0", "COLOR_0"),
        _attribute("joints_0", "JOINTS_0"),
        _attribute("normal", "NORMAL"),
        _attribute("position", "POSITION"),
        _attribute("tangent", "TANGENT"),
        _attribute("texcoord_0", "TEXCOORD_0"),
        _attribute("texcoord_1", "TEXCOORD_1"),
        _attribute("texcoord_2", "TEXCOORD_2"),
        _attribute("texcoord_3", "TEXCOORD_3"),
        _attribute("weights_0", "WEIGHTS_0"),
    ),
    Primitive: (
        _field("attributes", encoding=Encoding.OBJECT),
        _field("indices", omit=omission.is_none),
        _field("material", omit=omission.is_none),
        _field("mode", omit=omission.is_default_mode, encoding=Encoding.CODE),
    ),
    Mesh: (
        _name(),
        # Required by the schema even when there are none.
        _field("primitives", encoding=Encoding.OBJECT_LIST),
        _field("weights", omit=omission.is_empty_list),
    ),
    Accessor: (
        _name(),
        _field("buffer_view", "bufferView", omit=omission.is_none),
        _field("byte_offset", "byteOffset", omit=omission.is_default_accessor_byte_offset),
        _field("component_type", "componentType", encoding=Encoding.CODE),
        _field("normalized", omit=omission.is_default_normalized),
        _field("count"),
        _field("type", encoding=Encoding.TAG),
        _field("max", omit=omission.is_empty_list),
        _field("min", omit=omission.is_empty_list),
    ),
    BufferView: (
        _name(),
        _field("buffer"),
        _field("byte_length", "byteLength"),
        # Unlike Accessor.byteOffset, written even at 0.
        _field("byte_offset", "byteOffset"),
        _field("byte_stride", "byteStride", omit=omission.is_none),
        _field("target", omit=omission.is_none, encoding=Encoding.CODE),
    ),
    Buffer: (
        _name(),
        _field("byte_length", "byteLength"),
        _field("uri", omit=omission.is_empty_string),
    ),
    Document: (
        _field("asset", encoding=Encoding.OBJECT),
        _field("scene", omit=omission.is_none),
        _field("scenes", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
        _field("nodes", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
        _field("materials", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
        _field("meshes", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
        _field("accessors", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
        _field(
            "buffer_views", "bufferViews",
            omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST,
        ),
        _field("buffers", omit=omission.is_empty_list, encoding=Encoding.OBJECT_LIST),
    ),
}

VECTOR_TYPES = (Translation, Rotation, Scale, Color4)


def fields_for(entity: object) -> tuple[FieldSpec, ...]:
    """Return the field table for *entity*'s type."""
    try:
        return FIELDS[type(entity)]
    except KeyError:
        raise TypeError(f"No field table for {type(entity).__name__}") from None
