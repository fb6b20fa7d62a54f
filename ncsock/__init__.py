"""Raw packet building, checksums, frame header parsing and small network helpers."""

__version__ = "0.1.0"