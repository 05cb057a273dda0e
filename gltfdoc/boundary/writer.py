"""Two-pass exact-size writer.

The document is serialized once into a counting sink to learn its size,
then a second time into a buffer allocated at exactly that size. Both
passes go through :func:`gltfdoc.serialization.encoder.serialize`.
"""

from __future__ import annotations

import logging

from gltfdoc.models.document import Document
from gltfdoc.serialization.encoder import measure, serialize
from gltfdoc.serialization.sinks import BufferSink

logger = logging.getLogger(__name__)


def write_exact(document: Document) -> bytearray:
    """Return *document*'s serialization in a buffer with no spare capacity.

    Raises
    ------
    GenerationError
        If either pass fails or the two passes disagree on the size.
    """
    size = measure(document)
    sink = BufferSink(size)
    serialize(document, sink)
    buffer = sink.finish()
    logger.debug("Materialized %d bytes", len(buffer))
    return buffer


def write_gltf(buffer: bytearray, document: Document) -> None:
    """Replace the contents of *buffer* with *document*'s serialization."""
    buffer[:] = write_exact(document)
