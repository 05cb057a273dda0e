"""Default-omission predicates.

Each predicate answers "does this value equal the schema default, so the
field may be left out of the output?". Fields of the same Python type do
not share a rule: ``Asset.version`` is written even when empty,
``Mesh.primitives`` even when empty, and ``BufferView.byteOffset`` even at
zero while ``Accessor.byteOffset`` is dropped at zero. Float defaults are
compared exactly.
"""

from __future__ import annotations

from typing import Any, Callable

from gltfdoc.models.enums import AlphaMode, Mode

Predicate = Callable[[Any], bool]


def never(value: Any) -> bool:
    """Field is mandatory and always written."""
    return False


def is_empty_string(value: str) -> bool:
    return value == ""


def is_none(value: Any) -> bool:
    return value is None


def is_empty_list(value: list) -> bool:
    return len(value) == 0


def is_default_vector(value: Any) -> bool:
    """Translation, Rotation, Scale, Color4: whole-aggregate comparison."""
    return value.is_default()


def is_default_emissive_factor(value: tuple[float, float, float]) -> bool:
    return tuple(value) == (0.0, 0.0, 0.0)


def is_default_alpha_mode(value: AlphaMode) -> bool:
    return value == AlphaMode.OPAQUE


def is_default_alpha_cutoff(value: float) -> bool:
    return value == 0.5


def is_default_double_sided(value: bool) -> bool:
    return value is False


def is_default_metallic_factor(value: float) -> bool:
    return value == 1.0


def is_default_roughness_factor(value: float) -> bool:
    return value == 1.0


def is_default_mode(value: Mode) -> bool:
    return value == Mode.TRIANGLES


def is_default_accessor_byte_offset(value: int) -> bool:
    return value == 0


def is_default_normalized(value: bool) -> bool:
    return value is False
