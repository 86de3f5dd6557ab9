# SPDX-License-Identifier: EUPL-1.2

"""Byte-exact mirror of the Elf32_Ehdr / Elf64_Ehdr structures.

Nothing here validates the data, callers are expected to check the buffer
length and class before reading a record from it.
"""

from __future__ import annotations

import dataclasses
import functools
import struct
import sys

from typing import Any, Dict, Literal, Optional, Tuple

from elfhdr._data import ELFCLASS
from elfhdr._util import _Printable


ByteOrder = Literal['little', 'big']

_BYTEORDER_PREFIX: Dict[str, str] = {
    'little': '<',
    'big': '>',
}

_IDENT_FORMAT = '4sBBBBB7s'

# None is the native address type of the class (e_entry, e_phoff, e_shoff)
_FIELDS: Tuple[Tuple[str, Optional[str]], ...] = (
    ('e_type', 'H'),
    ('e_machine', 'H'),
    ('e_version', 'I'),
    ('e_entry', None),
    ('e_phoff', None),
    ('e_shoff', None),
    ('e_flags', 'I'),
    ('e_ehsize', 'H'),
    ('e_phentsize', 'H'),
    ('e_phnum', 'H'),
    ('e_shentsize', 'H'),
    ('e_shnum', 'H'),
    ('e_shstrndx', 'H'),
)


def _native(file_class: int) -> str:
    """struct.unpack/pack character for the native addresses."""
    if file_class == ELFCLASS._32:
        return 'I'
    elif file_class == ELFCLASS._64:
        return 'Q'
    raise ValueError(f'Unkown class: {file_class}')


def _field_format(file_class: int) -> Tuple[str, ...]:
    native = _native(file_class)
    return tuple(char or native for _, char in _FIELDS)


@functools.lru_cache(maxsize=None)
def _struct(file_class: int, byteorder: str) -> struct.Struct:
    try:
        prefix = _BYTEORDER_PREFIX[byteorder]
    except KeyError:
        raise ValueError(f'Unknown byte order: {byteorder!r}') from None
    return struct.Struct(prefix + _IDENT_FORMAT + ''.join(_field_format(int(file_class))))


def layout_size(file_class: int) -> int:
    """Size of the header record for the class, 52 or 64 bytes."""
    return _struct(int(file_class), 'little').size


def _swap(value: int, size: int) -> int:
    return int.from_bytes(value.to_bytes(size, 'little'), 'big')


@dataclasses.dataclass(frozen=True, repr=False)
class ELFIdentifier(_Printable):
    """ELF file header e_ident field."""

    magic: bytes
    file_class: int
    data_encoding: int
    file_version: int
    os_abi: int
    abi_version: int
    padding: bytes

    def __len__(self) -> int:
        return struct.calcsize(_IDENT_FORMAT)

    def __bytes__(self) -> bytes:
        return struct.pack(
            _IDENT_FORMAT,
            self.magic,
            self.file_class,
            self.data_encoding,
            self.file_version,
            self.os_abi,
            self.abi_version,
            self.padding,
        )


@dataclasses.dataclass(frozen=True, repr=False)
class ELFHeaderLayout(_Printable):
    """Raw ELF file header, fields are kept exactly as read."""

    e_ident: ELFIdentifier
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    @classmethod
    def from_buffer(
        cls,
        buffer: Any,
        file_class: int,
        byteorder: ByteOrder = sys.byteorder,
    ) -> ELFHeaderLayout:
        """Reads the record from the start of the buffer.

        Each field is read in place with struct.unpack_from, so there are no
        alignment requirements and the buffer itself is never copied.
        """
        values = _struct(int(file_class), byteorder).unpack_from(buffer)
        return cls(ELFIdentifier(*values[:7]), *values[7:])

    @property
    def file_class(self) -> int:
        return self.e_ident.file_class

    @property
    def address_size(self) -> int:
        return struct.calcsize('=' + _native(self.file_class))

    def _multibyte_fields(self) -> Dict[str, int]:
        return {
            name: struct.calcsize('=' + char)
            for (name, _), char in zip(_FIELDS, _field_format(self.file_class))
        }

    def swap_bytes(self) -> ELFHeaderLayout:
        """Returns a copy with every multi-byte field byte-reversed, e_ident is left as-is."""
        return dataclasses.replace(self, **{
            name: _swap(getattr(self, name), size)
            for name, size in self._multibyte_fields().items()
        })

    def to_bytes(self, byteorder: ByteOrder = sys.byteorder) -> bytes:
        return _struct(self.file_class, byteorder).pack(
            *dataclasses.astuple(self.e_ident),
            *(getattr(self, name) for name, _ in _FIELDS),
        )

    def __len__(self) -> int:
        return layout_size(self.file_class)

    def __bytes__(self) -> bytes:
        return self.to_bytes()
