"""Writable sinks driven by the serialization engine.

Two variants share one interface: :class:`CountingSink` only measures,
:class:`BufferSink` materializes into a buffer allocated up front at an
exact capacity.
"""

from __future__ import annotations

import abc

from gltfdoc.errors import GenerationError


class Sink(abc.ABC):
    """Base class for byte sinks."""

    @abc.abstractmethod
    def write(self, data: bytes) -> int:
        """Accept *data* and return the number of bytes consumed."""

    @property
    @abc.abstractmethod
    def bytes_written(self) -> int:
        """Total number of bytes accepted so far."""


class CountingSink(Sink):
    """Discard writer: counts bytes without storing them."""

    def __init__(self) -> None:
        self._count = 0

    def write(self, data: bytes) -> int:
        self._count += len(data)
        return len(data)

    @property
    def bytes_written(self) -> int:
        return self._count


class BufferSink(Sink):
    """Writes into a ``bytearray`` of fixed capacity.

    Writing past the capacity raises :class:`GenerationError`; the buffer
    never grows.

    Parameters
    ----------
    capacity:
        Exact number of bytes the buffer holds.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._buffer = bytearray(capacity)
        self._view: memoryview | None = memoryview(self._buffer)
        self._position = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def bytes_written(self) -> int:
        return self._position

    def write(self, data: bytes) -> int:
        if self._view is None:
            raise GenerationError("write to a finished buffer")
        end = self._position + len(data)
        if end > len(self._buffer):
            raise GenerationError(
                f"output exceeds measured size ({end} > {len(self._buffer)} bytes)"
            )
        self._view[self._position:end] = data
        self._position = end
        return len(data)

    def finish(self) -> bytearray:
        """Confirm the buffer is exactly full and hand it over.

        Raises
        ------
        GenerationError
            If fewer bytes were written than the buffer holds.
        """
        if self._position != len(self._buffer):
            raise GenerationError(
                f"output shorter than measured size "
                f"({self._position} < {len(self._buffer)} bytes)"
            )
        if self._view is not None:
            self._view.release()
            self._view = None
        return self._buffer
