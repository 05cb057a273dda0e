"""ExportChannel — the result register shared across the export boundary.

A channel holds the buffer of the most recent successful export and
exposes its address and length as plain integers, so a foreign caller
can read the bytes in place. One export at a time may hold the channel;
a second concurrent attempt is rejected rather than queued.
"""

from __future__ import annotations

import ctypes
import logging
import threading
from dataclasses import dataclass
from typing import Any

from gltfdoc.boundary.writer import write_exact
from gltfdoc.config import NULL_POINTER, NULL_SIZE
from gltfdoc.errors import ChannelBusyError, ErrorCode, GenerationError, GltfDocError
from gltfdoc.models.document import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """A published export: the owned buffer and where it lives in memory."""

    buffer: bytearray
    pointer: int
    size: int

    def to_dict(self) -> dict[str, Any]:
        return {"pointer": self.pointer, "size": self.size}


_EMPTY = ExportResult(buffer=bytearray(), pointer=NULL_POINTER, size=NULL_SIZE)


def _address_of(buffer: bytearray) -> tuple[int, Any]:
    """Return the address of *buffer*'s first byte and the ctypes view pinning it."""
    if not buffer:
        return NULL_POINTER, None
    view = (ctypes.c_char * len(buffer)).from_buffer(buffer)
    return ctypes.addressof(view), view


class ExportChannel:
    """Single-slot mailbox for exported documents.

    Starts empty (pointer 0, size 0) and changes only when an export
    succeeds. While published, the buffer is pinned and cannot be resized.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result = _EMPTY
        self._pin: Any = None

    @property
    def pointer(self) -> int:
        """Address of the most recently exported bytes."""
        return self._result.pointer

    @property
    def size(self) -> int:
        """Length of the most recently exported bytes."""
        return self._result.size

    @property
    def result(self) -> ExportResult:
        return self._result

    def result_bytes(self) -> bytes:
        """Copy of the most recently exported bytes."""
        return bytes(self._result.buffer)

    def is_busy(self) -> bool:
        return self._lock.locked()

    def publish(self, document: Document) -> ExportResult:
        """Export *document* and publish it, raising on failure.

        Raises
        ------
        ChannelBusyError
            If another export currently holds the channel.
        GenerationError
            If the document could not be serialized. The previously
            published result is left in place.
        """
        if not self._lock.acquire(blocking=False):
            raise ChannelBusyError("Export channel is held by another export.")
        try:
            try:
                buffer = write_exact(document)
            except GenerationError:
                raise
            except Exception as exc:
                raise GenerationError(f"Export failed: {exc}") from exc

            pointer, pin = _address_of(buffer)
            result = ExportResult(buffer=buffer, pointer=pointer, size=len(buffer))
            self._result = result
            self._pin = pin
        finally:
            self._lock.release()

        logger.info("Exported glTF document (%d bytes)", result.size)
        return result

    def export(self, document: Document) -> ErrorCode:
        """Export *document*, reporting the outcome as an :class:`ErrorCode`.

        Never raises.
        """
        try:
            self.publish(document)
        except ChannelBusyError:
            logger.warning("Export rejected: channel busy")
            return ErrorCode.MUTEX
        except GltfDocError as exc:
            logger.exception("Export failed")
            return exc.code
        except Exception:
            logger.exception("Export failed")
            return ErrorCode.GENERATION
        return ErrorCode.NONE
