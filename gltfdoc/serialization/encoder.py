"""Serialization engine — Document to pretty-printed glTF JSON bytes."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator

from gltfdoc.config import JSON_ENCODING, JSON_INDENT
from gltfdoc.errors import GenerationError
from gltfdoc.models.document import Document, GltfModel
from gltfdoc.serialization.fields import VECTOR_TYPES, Encoding, FieldSpec, fields_for
from gltfdoc.serialization.sinks import CountingSink, Sink

logger = logging.getLogger(__name__)


def to_tree(entity: GltfModel) -> dict[str, Any]:
    """Convert *entity* into an ordered dict of JSON values.

    Keys appear in schema order; fields whose omission predicate holds
    are skipped.
    """
    tree: dict[str, Any] = {}
    for spec in fields_for(entity):
        value = getattr(entity, spec.attr)
        if spec.omit(value):
            continue
        tree[spec.key] = _encode_value(spec, value)
    return tree


def _encode_value(spec: FieldSpec, value: Any) -> Any:
    encoding = spec.encoding
    if encoding is Encoding.VALUE:
        if isinstance(value, (list, tuple)):
            return list(value)
        return value
    if encoding is Encoding.TAG:
        return value.value
    if encoding is Encoding.CODE:
        return int(value)
    if encoding is Encoding.VECTOR:
        if not isinstance(value, VECTOR_TYPES):
            raise GenerationError(
                f"{spec.key}: expected a vector value, got {type(value).__name__}"
            )
        return value.to_list()
    if encoding is Encoding.OBJECT:
        return to_tree(value)
    if encoding is Encoding.OBJECT_LIST:
        return [to_tree(item) for item in value]
    raise GenerationError(f"{spec.key}: unknown encoding {encoding!r}")


def iter_chunks(document: Document) -> Iterator[bytes]:
    """Yield the UTF-8 encoded JSON text of *document* piece by piece."""
    encoder = json.JSONEncoder(
        indent=JSON_INDENT,
        ensure_ascii=False,
        allow_nan=False,
    )
    for chunk in encoder.iterencode(to_tree(document)):
        yield chunk.encode(JSON_ENCODING)


def serialize(document: Document, sink: Sink) -> int:
    """Write *document* into *sink* and return the number of bytes written.

    Raises
    ------
    GenerationError
        If the document holds a value that cannot be encoded (e.g. NaN)
        or the sink rejects a write.
    """
    try:
        for chunk in iter_chunks(document):
            sink.write(chunk)
    except GenerationError:
        raise
    except (TypeError, ValueError) as exc:
        raise GenerationError(f"Cannot encode document: {exc}") from exc
    return sink.bytes_written


def measure(document: Document) -> int:
    """Dry run: the exact byte length of *document*'s serialization."""
    size = serialize(document, CountingSink())
    logger.debug("Measured document at %d bytes", size)
    return size


def to_bytes(document: Document) -> bytes:
    """Serialize *document* in a single pass."""
    try:
        return b"".join(iter_chunks(document))
    except (TypeError, ValueError) as exc:
        raise GenerationError(f"Cannot encode document: {exc}") from exc


def to_json(document: Document) -> str:
    """Serialize *document* to a JSON string."""
    return to_bytes(document).decode(JSON_ENCODING)
