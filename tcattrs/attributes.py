"""Netlink attribute encoding, decoding and fixed-layout kernel structures."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Iterable

NLA_F_NESTED = 1 << 15
NLA_F_NET_BYTEORDER = 1 << 14
_ATTR_TYPE_MASK = 0x3FFF
_HEADER = struct.Struct("=HH")
_HEADER_LEN = _HEADER.size


class TcError(Exception):
    """Base error of the package."""


class _DescribedError(TcError):
    default_message = ""

    def __init__(self, context: str | None = None):
        if context:
            super().__init__(f"{context}: {self.default_message}")
        else:
            super().__init__(self.default_message)


class NoArgError(_DescribedError):
    """A required argument is missing."""

    default_message = "missing argument"


class NoArgAlterError(_DescribedError):
    """An argument was given that cannot be altered."""

    default_message = "argument cannot be altered"


class InvalidArgError(_DescribedError):
    """An argument has an invalid value."""

    default_message = "invalid argument"


class NotImplementedTcError(_DescribedError):
    """The requested functionality is not implemented."""

    default_message = "functionality not yet implemented"


class ValueType(enum.IntEnum):
    """How the data of an option is written into an attribute."""

    UINT8 = 0
    UINT16 = 1
    UINT32 = 2
    UINT64 = 3
    STRING = 4
    BYTES = 5
    FLAG = 6
    INT8 = 7
    INT16 = 8
    INT32 = 9
    INT64 = 10
    UINT16_BE = 11
    UINT32_BE = 12
    INT16_BE = 13


_NUMERIC_FORMATS = {
    ValueType.UINT8: "B",
    ValueType.UINT16: "H",
    ValueType.UINT32: "I",
    ValueType.UINT64: "Q",
    ValueType.INT8: "b",
    ValueType.INT16: "h",
    ValueType.INT32: "i",
    ValueType.INT64: "q",
}


@dataclass(frozen=True)
class Option:
    """One attribute to encode: its interpretation, type and value."""

    interpretation: ValueType | int
    attr_type: int
    data: Any = None


def _swap16(value: int) -> int:
    value &= 0xFFFF
    return ((value << 8) | (value >> 8)) & 0xFFFF


def _swap32(value: int) -> int:
    return int.from_bytes((value & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def _encode_payload(kind: ValueType, data: Any) -> bytes:
    if kind is ValueType.STRING:
        return data.encode() + b"\x00"
    if kind is ValueType.BYTES:
        return bytes(data)
    if kind is ValueType.FLAG:
        return b""
    if kind is ValueType.UINT16_BE:
        return struct.pack("=H", _swap16(data))
    if kind is ValueType.UINT32_BE:
        return struct.pack("=I", _swap32(data))
    if kind is ValueType.INT16_BE:
        return struct.pack("=H", _swap16(data & 0xFFFF))
    return struct.pack("=" + _NUMERIC_FORMATS[kind], data)


def _padding(length: int) -> int:
    return -length % 4


def marshal_attributes(options: Iterable[Option]) -> bytes:
    """Encode options as a sequence of netlink attributes."""
    out = bytearray()
    unknown = None
    for option in options:
        try:
            kind = ValueType(option.interpretation)
        except ValueError:
            unknown = option.interpretation
            continue
        try:
            payload = _encode_payload(kind, option.data)
            out += _HEADER.pack(_HEADER_LEN + len(payload), option.attr_type)
        except (struct.error, AttributeError, TypeError) as exc:
            raise TcError(f"attribute {option.attr_type}: {exc}") from exc
        out += payload
        out += b"\x00" * _padding(len(payload))
    if unknown is not None:
        raise TcError(f"unknown interpretation ({int(unknown)})")
    return bytes(out)


@dataclass(frozen=True)
class Attribute:
    """A decoded netlink attribute with its flag bits removed from the type."""

    attr_type: int
    data: bytes

    def _number(self, code: str, name: str) -> int:
        layout = struct.Struct("=" + code)
        if len(self.data) != layout.size:
            raise TcError(
                f"netlink: attribute {self.attr_type} is not a {name}; length: {len(self.data)}"
            )
        return layout.unpack(self.data)[0]

    def uint8(self) -> int:
        return self._number("B", "uint8")

    def uint16(self) -> int:
        return self._number("H", "uint16")

    def uint32(self) -> int:
        return self._number("I", "uint32")

    def uint64(self) -> int:
        return self._number("Q", "uint64")

    def int8(self) -> int:
        return self._number("b", "int8")

    def int16(self) -> int:
        return self._number("h", "int16")

    def int32(self) -> int:
        return self._number("i", "int32")

    def int64(self) -> int:
        return self._number("q", "int64")

    def string(self) -> str:
        data = self.data[:-1] if self.data.endswith(b"\x00") else self.data
        return data.decode(errors="replace")

    def flag(self) -> bool:
        if self.data:
            raise TcError(
                f"netlink: attribute {self.attr_type} is not a flag; length: {len(self.data)}"
            )
        return True


def decode_attributes(data: bytes) -> list[Attribute]:
    """Split a buffer into its netlink attributes."""
    data = bytes(data)
    attributes = []
    offset = 0
    while offset < len(data):
        remaining = len(data) - offset
        if remaining < _HEADER_LEN:
            raise TcError("netlink: invalid attribute; truncated header")
        length, attr_type = _HEADER.unpack_from(data, offset)
        if length > remaining:
            raise TcError(f"netlink: invalid attribute; length {length} exceeds buffer")
        if length == 0:
            offset += _HEADER_LEN
            continue
        if length < _HEADER_LEN:
            raise TcError(f"netlink: invalid attribute; length {length}")
        attributes.append(
            Attribute(attr_type & _ATTR_TYPE_MASK, data[offset + _HEADER_LEN : offset + length])
        )
        offset += length + _padding(length)
    return attributes


def unmarshal_netlink_attribute(data: bytes, value_type: ValueType) -> int:
    """Read one native-endian number of the given type from the start of data."""
    try:
        code = _NUMERIC_FORMATS[ValueType(value_type)]
    except (ValueError, KeyError) as exc:
        raise TcError(f"cannot read value of type {value_type!r}") from exc
    layout = struct.Struct("=" + code)
    if len(data) < layout.size:
        raise TcError(f"need {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(bytes(data))[0]


def _is_array(code: str) -> bool:
    return code[0].isdigit()


class NativeStruct:
    """Base for dataclasses that mirror a packed, native-endian kernel struct.

    Subclasses list one struct code per field in ``_layout``; a code with a
    count such as ``"3B"`` holds a tuple of that many values.
    """

    _layout: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def _struct(cls) -> struct.Struct:
        return struct.Struct("=" + "".join(cls._layout))

    def pack(self) -> bytes:
        values: list[int] = []
        for field, code in zip(fields(self), self._layout):
            value = getattr(self, field.name)
            if _is_array(code):
                values.extend(value)
            else:
                values.append(value)
        try:
            return self._struct().pack(*values)
        except struct.error as exc:
            raise TcError(f"{type(self).__name__}: {exc}") from exc

    def pack_aligned(self) -> bytes:
        data = self.pack()
        return data + b"\x00" * _padding(len(data))

    @classmethod
    def unpack(cls, data: bytes):
        layout = cls._struct()
        if len(data) < layout.size:
            raise TcError(f"{cls.__name__}: need {layout.size} bytes, got {len(data)}")
        flat = iter(layout.unpack_from(bytes(data)))
        values: list[Any] = []
        for code in cls._layout:
            if _is_array(code):
                count = int(code[:-1])
                values.append(tuple(next(flat) for _ in range(count)))
            else:
                values.append(next(flat))
        return cls(*values)


@dataclass
class Tcft(NativeStruct):
    """Timestamps of an action, as struct tcf_t."""

    install: int = 0
    last_use: int = 0
    expires: int = 0
    first_use: int = 0
    _layout = ("Q", "Q", "Q", "Q")