"""Document data model — entities, value types, and enumerations."""

from gltfdoc.models.document import (
    Accessor,
    Asset,
    Attributes,
    Buffer,
    BufferView,
    Document,
    GltfModel,
    Material,
    Mesh,
    Node,
    PbrMetallicRoughness,
    Primitive,
    Scene,
)
from gltfdoc.models.enums import AccessorType, AlphaMode, ComponentType, Mode, Target
from gltfdoc.models.values import Color4, Rotation, Scale, Translation

__all__ = [
    "Accessor",
    "AccessorType",
    "AlphaMode",
    "Asset",
    "Attributes",
    "Buffer",
    "BufferView",
    "Color4",
    "ComponentType",
    "Document",
    "GltfModel",
    "Material",
    "Mesh",
    "Mode",
    "Node",
    "PbrMetallicRoughness",
    "Primitive",
    "Rotation",
    "Scale",
    "Scene",
    "Target",
    "Translation",
]
