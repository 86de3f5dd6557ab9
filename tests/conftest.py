# SPDX-License-Identifier: EUPL-1.2

import struct

import pytest


_PREFIX = {'little': '<', 'big': '>'}
_DATA = {'little': 1, 'big': 2}


def build_header(
    file_class=2,
    byteorder='little',
    *,
    data_encoding=None,
    file_version=1,
    os_abi=0,
    abi_version=0,
    e_type=2,
    e_machine=62,
    e_version=1,
    e_entry=0x401000,
    e_phoff=0x40,
    e_shoff=0x3a98,
    e_flags=0,
    e_phentsize=None,
    e_phnum=11,
    e_shentsize=None,
    e_shnum=30,
    e_shstrndx=29,
):
    native = 'Q' if file_class == 2 else 'I'
    ehsize = 64 if file_class == 2 else 52
    if data_encoding is None:
        data_encoding = _DATA[byteorder]
    if e_phentsize is None:
        e_phentsize = 56 if file_class == 2 else 32
    if e_shentsize is None:
        e_shentsize = 64 if file_class == 2 else 40
    ident = b'\x7fELF' + bytes([file_class, data_encoding, file_version, os_abi, abi_version]) + bytes(7)
    return ident + struct.pack(
        _PREFIX[byteorder] + 'HHI' + native * 3 + 'IHHHHHH',
        e_type,
        e_machine,
        e_version,
        e_entry,
        e_phoff,
        e_shoff,
        e_flags,
        ehsize,
        e_phentsize,
        e_phnum,
        e_shentsize,
        e_shnum,
        e_shstrndx,
    )


@pytest.fixture
def header64():
    return build_header(2, 'little')


@pytest.fixture
def header32():
    return build_header(
        1, 'little',
        e_machine=3,
        e_entry=0x8048000,
        e_phoff=0x34,
        e_shoff=0x1f70,
    )


@pytest.fixture
def make_header():
    return build_header
