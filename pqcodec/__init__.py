"""Encoders and decoders for the value and level encodings of Parquet data pages."""

__version__ = "0.1.0"