# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

import logging
import sys

from typing import Any, Dict

from elfhdr._data import EI, ELFCLASS, ELFDATA, MAGIC
from elfhdr._errors import InvalidFile, InvalidMagic
from elfhdr._layout import ByteOrder, ELFHeaderLayout, layout_size
from elfhdr._util import _EnumItem


_logger = logging.getLogger(__name__)

_BYTEORDER_DATA: Dict[str, int] = {
    'little': ELFDATA.LSB,
    'big': ELFDATA.MSB,
}


def _byte_view(buffer: Any) -> memoryview:
    view = memoryview(buffer)
    if not view.c_contiguous:
        raise InvalidFile('Buffer is not C-contiguous')
    if view.ndim != 1 or view.format != 'B':
        view = view.cast('B')
    return view.toreadonly()


def _check_byteorder(byteorder: str) -> int:
    try:
        return _BYTEORDER_DATA[byteorder]
    except KeyError:
        raise ValueError(f'Unknown byte order: {byteorder!r}') from None


def has_valid_magic(buffer: Any) -> bool:
    """Checks the ELF magic, short buffers are reported as not matching.

    Raises InvalidFile only for buffers that are not C-contiguous.
    """
    return bytes(_byte_view(buffer)[:len(MAGIC)]) == MAGIC


def validate_buffer(buffer: Any) -> _EnumItem:
    """Checks the buffer is long enough, has the ELF magic and a known class.

    Returns the class, ELFCLASS._32 or ELFCLASS._64.
    """
    data = _byte_view(buffer)
    if len(data) <= EI.CLASS:
        raise InvalidFile(f'Buffer too small to hold the ELF identification ({len(data)} bytes)')
    magic = bytes(data[:len(MAGIC)])
    if magic != MAGIC:
        raise InvalidMagic(magic)
    file_class = ELFCLASS.from_value(data[EI.CLASS])
    if file_class not in (ELFCLASS._32, ELFCLASS._64):
        raise InvalidFile(f'Unknown ELF class: {int(file_class)}')
    return file_class


def detect_endianness(buffer: Any, file_class: int) -> _EnumItem:
    """Returns the data encoding of an already validated buffer.

    Also checks the buffer can hold the full header record of the class.
    """
    data = _byte_view(buffer)
    if len(data) <= EI.DATA:
        raise InvalidFile('Buffer too small to hold the ELF data encoding')
    endian = ELFDATA.from_value(data[EI.DATA])
    if endian not in (ELFDATA.LSB, ELFDATA.MSB):
        raise InvalidFile(f'Unknown ELF data encoding: {int(endian)}')
    size = layout_size(file_class)
    if len(data) < size:
        raise InvalidFile(
            f'Buffer too small for the ELF header, got `{len(data)}` bytes '
            f'but was expecting at least `{size}`'
        )
    return endian


class RawELFHeader():
    """Read-only view of an ELF header, selected by class.

    The record holds the fields as read in the given byte order, which is not
    necessarily the byte order of the file, see normalized().
    """

    __slots__ = ('_data', '_record', '_byteorder')

    def __init__(self, data: memoryview, record: ELFHeaderLayout, byteorder: ByteOrder) -> None:
        self._data = data
        self._record = record
        self._byteorder = byteorder

    @classmethod
    def from_bytes(
        cls,
        buffer: Any,
        native_byteorder: ByteOrder = sys.byteorder,
    ) -> RawELFHeader:
        _check_byteorder(native_byteorder)
        data = _byte_view(buffer)
        file_class = validate_buffer(data)
        endian = detect_endianness(data, file_class)
        _logger.debug('Detected %s header, %s data encoding', file_class.name, endian.name)
        record = ELFHeaderLayout.from_buffer(data, file_class, native_byteorder)
        return cls(data, record, native_byteorder)

    @property
    def data(self) -> memoryview:
        return self._data

    @property
    def record(self) -> ELFHeaderLayout:
        return self._record

    @property
    def byteorder(self) -> ByteOrder:
        """Byte order the record fields were read in."""
        return self._byteorder

    @property
    def magic(self) -> bytes:
        return self._record.e_ident.magic

    @property
    def file_class(self) -> _EnumItem:
        return ELFCLASS.from_value(self._record.e_ident.file_class)

    @property
    def endian(self) -> _EnumItem:
        return ELFDATA.from_value(self._record.e_ident.data_encoding)

    @property
    def is_normalized(self) -> bool:
        return self.endian == _check_byteorder(self._byteorder)

    def swap_bytes(self) -> RawELFHeader:
        other: ByteOrder = 'big' if self._byteorder == 'little' else 'little'
        return RawELFHeader(self._data, self._record.swap_bytes(), other)

    def normalized(self) -> RawELFHeader:
        """Returns a view whose record fields read in the file byte order."""
        if self.is_normalized:
            return self
        _logger.debug('Swapping header bytes, file is %s and host is %s', self.endian.name, self._byteorder)
        return self.swap_bytes()

    def __len__(self) -> int:
        return len(self._record)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}: {self.file_class.name}, {self.endian.name}>'
