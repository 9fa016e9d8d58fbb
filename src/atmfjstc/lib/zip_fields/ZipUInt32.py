"""
This module contains the `ZipUInt32` class, a value type for the 4-byte little-endian unsigned integers that make up
most of the fixed part of ZIP headers (signatures, sizes, offsets, CRCs etc.), along with plain-int helpers for
decoding and encoding such fields directly.
"""

from dataclasses import dataclass
from typing import Union, Sequence, MutableSequence, Optional

from atmfjstc.lib.ez_repr import ez_render_object, as_is


FIELD_SIZE = 4
"""Size of a 32-bit ZIP field, in bytes"""

UINT32_MASK = 0xFFFFFFFF


ByteSource = Union[bytes, bytearray, memoryview, Sequence[int]]
ByteBuffer = Union[bytearray, memoryview, MutableSequence[int]]


@dataclass(frozen=True, repr=False)
class ZipUInt32:
    """
    An immutable 32-bit unsigned quantity, stored in ZIP files as exactly 4 bytes in little-endian order.

    The value is held as a regular Python int. Note that no range validation is performed upon construction: a value
    outside of ``[0, 2**32 - 1]`` (even a negative one) will be stored as-is, and only its low 32 bits (in two's
    complement, for negative values) will ever make it into the encoded bytes.

    Instances compare equal iff they hold the same value, and can be used as dict keys. Since they are immutable,
    copying an instance just returns the instance itself.
    """

    value: int

    @classmethod
    def from_bytes(cls, data: ByteSource, offset: int = 0, meaning: Optional[str] = None) -> 'ZipUInt32':
        """
        Decodes a value from the 4 bytes found at a given offset in a buffer.

        Args:
            data: The buffer to read from. Besides `bytes`-like objects, any sequence of ints is accepted. Each item
                is taken modulo 256, so signed byte values (e.g. -1 for 0xFF) decode correctly.
            offset: The position in the buffer where the little-endian value starts.
            meaning: An indication as to the meaning of the field being read (e.g. "CRC32"). It is used in the text of
                any exceptions that may be thrown.

        Returns:
            The decoded value, always in the range ``[0, 2**32 - 1]``.

        Raises:
            ZipUInt32OutOfBoundsError: If the buffer does not contain 4 bytes starting at `offset`.
        """
        return cls(decode_uint32_le(data, offset, meaning))

    def to_bytes(self) -> bytes:
        """
        Returns the 4-byte little-endian encoding of the low 32 bits of the value, as a new `bytes` object.
        """
        return encode_uint32_le(self.value)

    def write_into(self, buffer: ByteBuffer, offset: int = 0, meaning: Optional[str] = None):
        """
        Writes the 4-byte little-endian encoding of the value into a mutable buffer, in place.

        The buffer is never resized and no reference to it is kept after the call.

        Raises:
            ZipUInt32OutOfBoundsError: If the buffer does not have room for 4 bytes starting at `offset`. In this case
                the buffer is left untouched.
        """
        write_uint32_le(self.value, buffer, offset, meaning)

    def __int__(self) -> int:
        return self.value

    def __copy__(self) -> 'ZipUInt32':
        return self

    def __deepcopy__(self, memodict) -> 'ZipUInt32':
        return self

    def __repr__(self, max_width=120, indent=2, renderers=None) -> str:
        return ez_render_object(
            self.__class__.__name__, [('value', as_is(_format_hex(self.value)))],
            max_width=max_width, indent=indent, renderers=renderers
        )


def decode_uint32_le(data: ByteSource, offset: int = 0, meaning: Optional[str] = None) -> int:
    """
    Decodes the 4-byte little-endian unsigned int at a given offset in a buffer, without building a `ZipUInt32`.

    See `ZipUInt32.from_bytes` for the meaning of the parameters.
    """
    _check_bounds(len(data), offset, meaning)

    return (
        (_unsigned_byte(data[offset + 3]) << 24) +
        (_unsigned_byte(data[offset + 2]) << 16) +
        (_unsigned_byte(data[offset + 1]) << 8) +
        _unsigned_byte(data[offset])
    )


def encode_uint32_le(value: int) -> bytes:
    """
    Encodes the low 32 bits of an int as 4 bytes in little-endian order.
    """
    return (value & UINT32_MASK).to_bytes(FIELD_SIZE, byteorder='little')


def write_uint32_le(value: int, buffer: ByteBuffer, offset: int = 0, meaning: Optional[str] = None):
    """
    Writes the low 32 bits of an int into a mutable buffer at a given offset, as 4 bytes in little-endian order.

    See `ZipUInt32.write_into` for details.
    """
    _check_bounds(len(buffer), offset, meaning)

    for index, byte in enumerate(encode_uint32_le(value)):
        buffer[offset + index] = byte


def _unsigned_byte(byte: int) -> int:
    return byte & 0xFF


def _check_bounds(buffer_length: int, offset: int, meaning: Optional[str]):
    # Negative offsets must be caught here, as indexing would silently wrap around to the end of the buffer
    if (offset < 0) or (offset + FIELD_SIZE > buffer_length):
        raise ZipUInt32OutOfBoundsError(offset, buffer_length, meaning)


def _format_hex(value: int) -> str:
    return f"0x{value:08x}" if value >= 0 else f"-0x{-value:08x}"


class ZipUInt32OutOfBoundsError(IndexError):
    """
    Raised when a buffer does not contain 4 usable bytes at the offset where a 32-bit field is to be read or written.

    When reading an archive, this usually means the header being parsed is truncated or otherwise malformed.
    """

    offset: int
    buffer_length: int
    meaning: Optional[str]

    def __init__(self, offset: int, buffer_length: int, meaning: Optional[str] = None):
        self.offset = offset
        self.buffer_length = buffer_length
        self.meaning = meaning

        super().__init__(
            f"At offset {offset}, expected {FIELD_SIZE} "
            f"bytes{f' for {meaning}' if meaning is not None else ''}"
            f", but the buffer is only {buffer_length} bytes long"
        )
