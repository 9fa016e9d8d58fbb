"""
Value types for the fixed-width fields found in ZIP archive headers.

This package provides `ZipUInt32`, an immutable wrapper for the 4-byte little-endian unsigned integers used throughout
the ZIP format for signatures, sizes and offsets, along with a registry of the well-known ZIP record signatures (see
the `signatures` module).

Reading and writing whole headers, central directories etc. is left to the archive reader/writer using these types.
"""


__version__ = '1.0.0'
