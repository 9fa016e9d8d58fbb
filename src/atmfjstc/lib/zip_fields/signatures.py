"""
Well-known 32-bit signatures ("magic" values) that identify the records in a ZIP file.
"""

from typing import NamedTuple, Optional, Tuple, Union, Dict

from atmfjstc.lib.zip_fields.ZipUInt32 import ZipUInt32


LOCAL_FILE_HEADER = ZipUInt32(0x04034b50)
"""Marks the start of a local file header record ("PK\\x03\\x04")"""

CENTRAL_FILE_HEADER = ZipUInt32(0x02014b50)
"""Marks the start of a central directory file header record ("PK\\x01\\x02")"""

DATA_DESCRIPTOR = ZipUInt32(0x08074b50)
"""
Marks a data descriptor, i.e. the size/CRC record that follows the file data when these could not be written in the
local header ("PK\\x07\\x08").

PKWARE actually defines this as the marker for split/spanned archives, but other archivers have started using it as a
data descriptor signature as well, so expect to find it in both roles.
"""

ARCHIVE_EXTRA_DATA = ZipUInt32(0x08064b50)
"""Marks an archive extra data record ("PK\\x06\\x08")"""

SINGLE_SEGMENT_SPLIT_MARKER = ZipUInt32(0x30304b50)
"""
Marks archives that were supposed to be split or spanned, but ended up needing only a single segment, so are actually
neither. This is the "PK00" prefix found at the start of some archives.
"""

ZIP64_MAGIC_VALUE = ZipUInt32(0xFFFFFFFF)
"""
Placeholder stored in 32-bit size and offset fields when the real value is in the ZIP64 extra field. Not a record
signature as such.
"""


class ZipSignature(NamedTuple):
    name: str
    value: ZipUInt32
    description: str


KNOWN_SIGNATURES: Tuple[ZipSignature, ...] = (
    ZipSignature('LOCAL_FILE_HEADER', LOCAL_FILE_HEADER, "local file header"),
    ZipSignature('CENTRAL_FILE_HEADER', CENTRAL_FILE_HEADER, "central directory file header"),
    ZipSignature('DATA_DESCRIPTOR', DATA_DESCRIPTOR, "data descriptor or split archive marker"),
    ZipSignature('ARCHIVE_EXTRA_DATA', ARCHIVE_EXTRA_DATA, "archive extra data record"),
    ZipSignature('SINGLE_SEGMENT_SPLIT_MARKER', SINGLE_SEGMENT_SPLIT_MARKER, "single segment split archive marker"),
    ZipSignature('ZIP64_MAGIC_VALUE', ZIP64_MAGIC_VALUE, "ZIP64 placeholder value"),
)

_SIGNATURES_BY_VALUE: Dict[ZipUInt32, ZipSignature] = {signature.value: signature for signature in KNOWN_SIGNATURES}


def identify_signature(value: Union[ZipUInt32, int]) -> Optional[ZipSignature]:
    """
    Looks up a decoded 32-bit field among the known ZIP signatures.

    Args:
        value: The field, either as a `ZipUInt32` or as a plain int.

    Returns:
        The matching `ZipSignature` entry, or None if the value is not a known signature.
    """
    if not isinstance(value, ZipUInt32):
        value = ZipUInt32(value)

    return _SIGNATURES_BY_VALUE.get(value)


def is_zip64_placeholder(value: Union[ZipUInt32, int]) -> bool:
    """
    Checks whether a 32-bit size or offset field holds the ZIP64 placeholder, meaning that the real value must be
    looked up in the ZIP64 extra field.
    """
    return int(value) == ZIP64_MAGIC_VALUE.value
