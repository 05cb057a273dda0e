"""Export boundary — two-pass writer and the process-wide result register.

The module-level functions operate on one default :class:`ExportChannel`:

    code = export(document)
    if code == ErrorCode.NONE:
        address, length = pointer(), size()
"""

from __future__ import annotations

from gltfdoc.boundary.channel import ExportChannel, ExportResult
from gltfdoc.boundary.writer import write_exact, write_gltf
from gltfdoc.errors import ErrorCode
from gltfdoc.models.document import Document

__all__ = [
    "ExportChannel",
    "ExportResult",
    "default_channel",
    "export",
    "pointer",
    "result_bytes",
    "size",
    "write_exact",
    "write_gltf",
]

_channel = ExportChannel()


def default_channel() -> ExportChannel:
    """Return the process-wide export channel."""
    return _channel


def export(document: Document) -> ErrorCode:
    """Export *document* into the process-wide channel."""
    return _channel.export(document)


def pointer() -> int:
    """Address of the last successful export, 0 if none."""
    return _channel.pointer


def size() -> int:
    """Byte length of the last successful export, 0 if none."""
    return _channel.size


def result_bytes() -> bytes:
    """Copy of the last successful export's bytes."""
    return _channel.result_bytes()
