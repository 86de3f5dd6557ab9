# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

import dataclasses
import logging
import sys

from typing import Any

from elfhdr._data import EI, ELFCLASS, ELFDATA, EM, ET, EV, MAGIC, OSABI
from elfhdr._errors import ELFException, InvalidFile, InvalidMagic, ParseError
from elfhdr._layout import ByteOrder, ELFHeaderLayout, ELFIdentifier, layout_size
from elfhdr._raw import RawELFHeader, detect_endianness, has_valid_magic, validate_buffer
from elfhdr._util import _EnumItem, _Printable, even_hex_repr


__all__ = [
    'Address',
    'EI',
    'ELFCLASS',
    'ELFDATA',
    'ELFException',
    'ELFHeader',
    'ELFHeaderLayout',
    'ELFIdentifier',
    'EM',
    'ET',
    'EV',
    'InvalidFile',
    'InvalidMagic',
    'MAGIC',
    'OSABI',
    'ParseError',
    'RawELFHeader',
    'detect_endianness',
    'has_valid_magic',
    'layout_size',
    'parse_header',
    'parse_header_async',
    'validate_buffer',
]

__version__ = '0.1.0'

_logger = logging.getLogger(__name__)


class Address(int):
    """Virtual address or file offset, always widened to 64 bits."""

    def __new__(cls, value: int) -> Address:
        if not 0 <= value < 1 << 64:
            raise ValueError(f'Address out of range: {value}')
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f'Address({even_hex_repr(self)})'

    def __str__(self) -> str:
        return even_hex_repr(self)


@dataclasses.dataclass(frozen=True, repr=False)
class ELFHeader(_Printable):
    """ELF file header.

    Coded fields are enum items, values outside the known set are kept as
    UNKNOWN items (see ``_EnumItem.is_unknown``) instead of failing the parse.
    """

    file_class: _EnumItem
    endian: _EnumItem
    version: _EnumItem
    os_abi: _EnumItem
    abi_version: int
    file_type: _EnumItem
    machine: _EnumItem
    elf_version: _EnumItem
    entry: Address
    program_header_offset: Address
    section_header_offset: Address
    flags: int
    elf_header_size: int
    program_header_entry_size: int
    program_header_number: int
    section_header_entry_size: int
    section_header_number: int
    section_header_string_table_index: int

    @classmethod
    def from_raw(cls, raw: RawELFHeader) -> ELFHeader:
        """Projects a raw header, swapping its bytes first if needed."""
        h = raw.normalized().record
        return cls(
            file_class=ELFCLASS.from_value(h.e_ident.file_class),
            endian=ELFDATA.from_value(h.e_ident.data_encoding),
            version=EV.from_value(h.e_ident.file_version),
            os_abi=OSABI.from_value(h.e_ident.os_abi),
            abi_version=h.e_ident.abi_version,
            file_type=ET.from_value(h.e_type),
            machine=EM.from_value(h.e_machine),
            elf_version=EV.from_value(h.e_version),
            entry=Address(h.e_entry),
            program_header_offset=Address(h.e_phoff),
            section_header_offset=Address(h.e_shoff),
            flags=h.e_flags,
            elf_header_size=h.e_ehsize,
            program_header_entry_size=h.e_phentsize,
            program_header_number=h.e_phnum,
            section_header_entry_size=h.e_shentsize,
            section_header_number=h.e_shnum,
            section_header_string_table_index=h.e_shstrndx,
        )

    @classmethod
    def from_bytes(
        cls,
        data: Any,
        native_byteorder: ByteOrder = sys.byteorder,
    ) -> ELFHeader:
        return cls.from_raw(RawELFHeader.from_bytes(data, native_byteorder))

    @property
    def is_64bit(self) -> bool:
        return self.file_class == ELFCLASS._64

    def __len__(self) -> int:
        return layout_size(self.file_class)


def parse_header(
    buffer: Any,
    *,
    native_byteorder: ByteOrder = sys.byteorder,
) -> ELFHeader:
    """Decodes the ELF header at the start of the buffer.

    The buffer can be any C-contiguous object supporting the buffer protocol,
    it is read in place and never modified.

    Raises InvalidFile if the buffer is too short or has an unknown class or
    data encoding, and InvalidMagic if it does not start with the ELF magic.
    Buffers that are not C-contiguous raise InvalidFile as well.
    """
    header = ELFHeader.from_bytes(buffer, native_byteorder)
    _logger.debug('Parsed header: %s %s', header.file_type.name, header.machine.name)
    return header


async def parse_header_async(
    buffer: Any,
    *,
    native_byteorder: ByteOrder = sys.byteorder,
) -> ELFHeader:
    """Like parse_header, for use in coroutines.

    Decoding does not block, so this never yields to the event loop.
    """
    return parse_header(buffer, native_byteorder=native_byteorder)
