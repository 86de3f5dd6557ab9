# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations


class ELFException(Exception):
    pass


class ParseError(ELFException):
    """ELF header could not be decoded."""


class InvalidFile(ParseError):
    """Buffer does not hold a decodable ELF header."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.reason!r})'


class InvalidMagic(ParseError):
    """Buffer does not start with the ELF magic."""

    def __init__(self, magic: bytes) -> None:
        super().__init__(f'Invalid ELF magic: {magic!r}')
        self.magic = magic

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.magic!r})'
