"""Serialization engine — omission policy, field tables, encoder, and sinks."""

from gltfdoc.serialization.encoder import measure, serialize, to_bytes, to_json, to_tree
from gltfdoc.serialization.fields import FIELDS, Encoding, FieldSpec
from gltfdoc.serialization.sinks import BufferSink, CountingSink, Sink

__all__ = [
    "BufferSink",
    "CountingSink",
    "Encoding",
    "FIELDS",
    "FieldSpec",
    "Sink",
    "measure",
    "serialize",
    "to_bytes",
    "to_json",
    "to_tree",
]
