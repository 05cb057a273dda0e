"""gltfdoc — glTF 2.0 scene documents serialized into exact-size buffers."""

__version__ = "0.1.0"

from gltfdoc.boundary import (
    ExportChannel,
    ExportResult,
    export,
    pointer,
    result_bytes,
    size,
    write_exact,
    write_gltf,
)
from gltfdoc.errors import ChannelBusyError, ErrorCode, GenerationError, GltfDocError
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
from gltfdoc.serialization import measure, to_bytes, to_json

__all__ = [
    "__version__",
    # Data model
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
    # Serialization
    "measure",
    "to_bytes",
    "to_json",
    # Export boundary
    "ChannelBusyError",
    "ErrorCode",
    "ExportChannel",
    "ExportResult",
    "GenerationError",
    "GltfDocError",
    "export",
    "pointer",
    "result_bytes",
    "size",
    "write_exact",
    "write_gltf",
]
