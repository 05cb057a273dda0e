"""Document — the in-memory glTF 2.0 scene description.

Every entity's no-argument constructor yields its canonical default
instance; callers then customize it field by field. Assignments are
validated, so a value of the wrong type is rejected where it is made.

Indices stored on entities (``Document.scene``, ``Node.mesh``,
``Node.children``, ``Primitive.material`` ...) are positions into the
corresponding ``Document`` list. Keeping them in range is the caller's
responsibility; nothing here checks them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from gltfdoc.config import GENERATOR, GLTF_VERSION
from gltfdoc.models.enums import AccessorType, AlphaMode, ComponentType, Mode, Target
from gltfdoc.models.values import Color4, Rotation, Scale, Translation


class GltfModel(BaseModel):
    """Base for all document entities."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class Asset(GltfModel):
    """Metadata about the glTF asset."""

    copyright: str = ""
    generator: str = GENERATOR
    version: str = GLTF_VERSION
    """Written even when empty; the schema requires it."""

    min_version: str = GLTF_VERSION


class Scene(GltfModel):
    """A set of root nodes to render."""

    name: str = ""
    nodes: list[NonNegativeInt] = Field(default_factory=list)


class Node(GltfModel):
    """A node in the scene hierarchy with a TRS transform."""

    name: str = ""
    mesh: NonNegativeInt | None = None
    translation: Translation = Field(default_factory=Translation)
    rotation: Rotation = Field(default_factory=Rotation)
    scale: Scale = Field(default_factory=Scale)
    children: list[NonNegativeInt] = Field(default_factory=list)


class PbrMetallicRoughness(GltfModel):
    """Metallic-roughness material model parameters."""

    base_color_factor: Color4 = Field(default_factory=Color4)
    metallic_factor: float = 1.0
    roughness_factor: float = 1.0


class Material(GltfModel):
    """Material appearance of a primitive."""

    name: str = ""
    emissive_factor: tuple[float, float, float] = (0.0, 0.0, 0.0)
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    alpha_cutoff: float = 0.5
    double_sided: bool = False
    pbr_metallic_roughness: PbrMetallicRoughness = Field(
        default_factory=PbrMetallicRoughness,
    )


class Attributes(GltfModel):
    """Accessor indices of a primitive's vertex attributes."""

    color_0: NonNegativeInt | None = None
    joints_0: NonNegativeInt | None = None
    normal: NonNegativeInt | None = None
    position: NonNegativeInt | None = None
    tangent: NonNegativeInt | None = None
    texcoord_0: NonNegativeInt | None = None
    texcoord_1: NonNegativeInt | None = None
    texcoord_2: NonNegativeInt | None = None
    texcoord_3: NonNegativeInt | None = None
    weights_0: NonNegativeInt | None = None


class Primitive(GltfModel):
    """Geometry to be rendered with a given material."""

    attributes: Attributes = Field(default_factory=Attributes)
    indices: NonNegativeInt | None = None
    material: NonNegativeInt | None = None
    mode: Mode = Mode.TRIANGLES


class Mesh(GltfModel):
    """A set of primitives to be rendered together."""

    name: str = ""
    primitives: list[Primitive] = Field(default_factory=list)
    weights: list[float] = Field(default_factory=list)


class Accessor(GltfModel):
    """A typed view into a buffer view."""

    name: str = ""
    buffer_view: NonNegativeInt | None = None
    byte_offset: NonNegativeInt = 0
    component_type: ComponentType = ComponentType.BYTE
    normalized: bool = False
    count: NonNegativeInt = 0
    type: AccessorType = AccessorType.SCALAR
    max: list[float] = Field(default_factory=list)
    min: list[float] = Field(default_factory=list)


class BufferView(GltfModel):
    """A contiguous byte range of a buffer."""

    name: str = ""
    buffer: NonNegativeInt = 0
    byte_length: NonNegativeInt = 0
    byte_offset: NonNegativeInt = 0
    byte_stride: NonNegativeInt | None = None
    target: Target | None = None


class Buffer(GltfModel):
    """Raw binary data, referenced by URI."""

    name: str = ""
    byte_length: NonNegativeInt = 0
    uri: str = ""


class Document(GltfModel):
    """Root of a glTF asset."""

    asset: Asset = Field(default_factory=Asset)
    scene: NonNegativeInt | None = None
    scenes: list[Scene] = Field(default_factory=list)
    nodes: list[Node] = Field(default_factory=list)
    materials: list[Material] = Field(default_factory=list)
    meshes: list[Mesh] = Field(default_factory=list)
    accessors: list[Accessor] = Field(default_factory=list)
    buffer_views: list[BufferView] = Field(default_factory=list)
    buffers: list[Buffer] = Field(default_factory=list)
