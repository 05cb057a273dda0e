"""Enumerations of the glTF 2.0 schema subset.

String-tagged enums derive from ``str``; numeric-coded enums derive from
``IntEnum``. Which form a field is written in is decided by the field
table in :mod:`gltfdoc.serialization.fields`, not by the enum base class.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class AlphaMode(str, Enum):
    """Material alpha rendering mode."""

    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"


class AccessorType(str, Enum):
    """Shape of a single accessor element."""

    SCALAR = "SCALAR"
    VEC2 = "VEC2"
    VEC3 = "VEC3"
    VEC4 = "VEC4"
    MAT2 = "MAT2"
    MAT3 = "MAT3"
    MAT4 = "MAT4"


class ComponentType(IntEnum):
    """Datatype of accessor components (OpenGL type codes)."""

    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125
    FLOAT = 5126


class Target(IntEnum):
    """Intended GPU buffer binding of a buffer view."""

    ARRAY_BUFFER = 34962
    ELEMENT_ARRAY_BUFFER = 34963


class Mode(IntEnum):
    """Topology of a mesh primitive."""

    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6
