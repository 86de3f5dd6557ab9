# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

from typing import Any, Dict, Tuple


def even_hex_repr(value: int) -> str:
    hex_repr = f'{value:x}'
    hex_repr = ('0' * (len(hex_repr) % 2)) + hex_repr
    return f'0x{hex_repr}'


class _Printable():
    """Generates a nice repr showing the object attributes with support for nested objects.

    Might break / look bad if non _Printable attributes have multiple lines in their repr.
    """

    def _pad(self, level: int) -> str:
        return '  ' * level

    def _repr(self, level: int) -> str:
        def value_repr(value: Any) -> str:
            if isinstance(value, _Printable):
                return value._repr(level + 1)
            elif isinstance(value, int) and not isinstance(value, _EnumItem):
                return even_hex_repr(value)
            return repr(value)

        return '{}(\n{}{})'.format(self._name, ''.join(
            '{}{}={},\n'.format(self._pad(level + 1), key, value_repr(value))
            for key, value in self._values.items()
        ), self._pad(level))

    @property
    def _name(self) -> str:
        return self.__class__.__name__

    @property
    def _values(self) -> Dict[Any, Any]:
        return {
            key: value
            for key, value in vars(self).items()
            if not key.startswith('_')
        }

    def __repr__(self) -> str:
        return self._repr(0)


class _EnumItem(int):
    """Custom int that tracks the enum name."""

    name: str

    def __new__(cls, value: int, name: str) -> _EnumItem:
        obj = super().__new__(cls, value)
        obj.name = name
        return obj

    @property
    def is_unknown(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f'<{self.name}: {int(self)}>'

    def __reduce__(self) -> Tuple[Any, ...]:
        return (self.__class__, (int(self), self.name))


class _UnknownItem(_EnumItem):
    """Value that is not part of the enum, kept as-is."""

    @property
    def is_unknown(self) -> bool:
        return True


class _EnumMeta(type):
    _value_map: Dict[int, _EnumItem]

    def __new__(
        mcs,
        name: str,
        bases: Tuple[Any],
        dict_: Dict[str, Any],
    ) -> _EnumMeta:
        new_dict = {
            key: _EnumItem(value, f'{name}.{key}') if isinstance(value, int) else value
            for key, value in dict_.items()
        }
        cls = super().__new__(mcs, name, bases, new_dict)
        # aliases: the first declared name wins
        cls._value_map = {}
        for value in new_dict.values():
            if isinstance(value, _EnumItem):
                cls._value_map.setdefault(int(value), value)
        return cls


class _Enum(metaclass=_EnumMeta):

    @classmethod
    def from_value(cls, value: int) -> _EnumItem:
        """Total lookup, values outside the enum come back as an UNKNOWN item."""
        item = cls._value_map.get(value)
        if item is not None:
            return item
        return _UnknownItem(value, f'{cls.__name__}.UNKNOWN')

    @classmethod
    def known(cls, value: int) -> bool:
        return value in cls._value_map

    @classmethod
    def items(cls) -> Tuple[_EnumItem, ...]:
        return tuple(cls._value_map.values())
