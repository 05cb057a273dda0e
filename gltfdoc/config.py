"""Global configuration: schema version, generator tag, output formatting."""

# Version of the glTF schema targeted by the document model
GLTF_VERSION = "2.0"

# Default Asset.generator tag
GENERATOR = "gltfdoc v0.1.0"

# Pretty-print settings for the serialized JSON
JSON_INDENT = 2
JSON_ENCODING = "utf-8"

# Result register values reported before any successful export
NULL_POINTER = 0
NULL_SIZE = 0
