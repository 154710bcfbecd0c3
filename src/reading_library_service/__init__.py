"""Reading library service: content ingestion and annotation anchoring."""

__version__ = "0.1.0"
