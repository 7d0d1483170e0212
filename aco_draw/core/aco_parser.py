"""Reader for Adobe .aco colour swatch files.

Layout (big-endian throughout):
  version     u16   ignored
  count       u16   number of records N
  N records   u16 colour space id + 8-byte payload

Only the first section is read. Anything after the N-th record (such as
the version 2 section with swatch names) is left unread.
"""

import io
from collections.abc import Iterator
from typing import BinaryIO

from aco_draw import registry
from aco_draw.core.binary import read_u16_be
from aco_draw.core.errors import TruncatedFileError
from aco_draw.core.types import Colour, Palette, RawRecord

PAYLOAD_SIZE = 8


def parse_aco_file(path: str) -> Palette:
    """Parse a .aco file from disk."""
    with open(path, 'rb') as f:
        return read_colours(f)


def parse_aco_bytes(data: bytes) -> Palette:
    """Parse .aco content already held in memory."""
    return read_colours(io.BytesIO(data))


def read_colours(stream: BinaryIO) -> Palette:
    """Decode every record in `stream` into a Palette.

    Raises TruncatedFileError or UnsupportedColourSpaceError on the first
    bad record. No partial palette is returned.
    """
    version = read_u16_be(_read_exact(stream, 2, 'version'))
    colours = [decode_record(record) for record in iter_records(stream)]
    return Palette(version=version, colours=colours)


def iter_records(stream: BinaryIO) -> Iterator[RawRecord]:
    """Yield raw records from a stream positioned just after the version field."""
    count = read_u16_be(_read_exact(stream, 2, 'record count'))
    for i in range(count):
        space_id = read_u16_be(_read_exact(stream, 2, f'colour space id of record {i + 1}/{count}'))
        payload = _read_exact(stream, PAYLOAD_SIZE, f'payload of record {i + 1}/{count}')
        yield RawRecord(space_id=space_id, payload=payload)


def decode_record(record: RawRecord) -> Colour:
    """Dispatch one record to the decoder registered for its colour space."""
    return registry.get(record.space_id).decode(record.payload)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedFileError(what, size, len(data))
    return data
