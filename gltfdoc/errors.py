"""Exception taxonomy and boundary error codes."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Status returned across the export boundary.

    Kept as a plain integer so it can be handed to foreign callers as-is.
    """

    NONE = 0
    MUTEX = 1
    GENERATION = 2


class GltfDocError(Exception):
    """Base class for all gltfdoc errors."""

    code: ErrorCode = ErrorCode.GENERATION


class ChannelBusyError(GltfDocError):
    """Raised when another export currently holds the export channel."""

    code = ErrorCode.MUTEX


class GenerationError(GltfDocError):
    """Raised when a document cannot be serialized into its output buffer."""

    code = ErrorCode.GENERATION
