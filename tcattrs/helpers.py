"""Conversions between addresses, byte strings and integers."""

from __future__ import annotations

import ipaddress
import re
import struct
from ipaddress import IPv4Address, IPv6Address

from .attributes import InvalidArgError

_NATIVE_U32 = struct.Struct("=I")
_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")
_HEX_QUAD = re.compile(r"[0-9a-fA-F]{4}")
_MAC_LENGTHS = (6, 8, 20)


def _as_address(ip) -> IPv4Address | IPv6Address:
    if isinstance(ip, (IPv4Address, IPv6Address)):
        return ip
    if ip is None:
        raise InvalidArgError("no IP address")
    try:
        return ipaddress.ip_address(ip)
    except ValueError as exc:
        raise InvalidArgError(f"{ip!r}") from exc


def ip_to_uint32(ip) -> int:
    """Return an IPv4 address as the native-endian integer of its four bytes."""
    address = _as_address(ip)
    if isinstance(address, IPv6Address):
        mapped = address.ipv4_mapped
        if mapped is None:
            raise InvalidArgError(f"{address} is not an IPv4 address")
        address = mapped
    return _NATIVE_U32.unpack(address.packed)[0]


def uint32_to_ip(value: int) -> IPv4Address:
    """Return the IPv4 address whose native-endian integer is ``value``."""
    return IPv4Address(_NATIVE_U32.pack(value))


def bytes_to_ip(data: bytes) -> IPv4Address | IPv6Address:
    """Build an address from 4 or 16 bytes."""
    data = bytes(data)
    if len(data) == 4:
        return IPv4Address(data)
    if len(data) == 16:
        return IPv6Address(data)
    raise InvalidArgError(f"address of {len(data)} bytes")


def ip_to_bytes(ip) -> bytes:
    """Return the packed bytes of an address."""
    return _as_address(ip).packed


def bytes_to_hardware_addr(mac: bytes) -> bytes:
    """Return a hardware address from its bytes."""
    return bytes(mac)


def _parse_mac(text: str) -> bytes:
    if len(text) >= 14 and text[2] in ":-":
        groups = text.split(text[2])
        pattern = _HEX_PAIR
        size = len(groups)
    elif len(text) >= 14 and text[4] == ".":
        groups = text.split(".")
        pattern = _HEX_QUAD
        size = 2 * len(groups)
    else:
        raise InvalidArgError(f"invalid MAC address {text!r}")
    if size not in _MAC_LENGTHS or not all(pattern.fullmatch(g) for g in groups):
        raise InvalidArgError(f"invalid MAC address {text!r}")
    return bytes.fromhex("".join(groups))


def hardware_addr_to_bytes(mac) -> bytes:
    """Return the bytes of a hardware address given as bytes or as text."""
    if isinstance(mac, str):
        return _parse_mac(mac)
    return bytes(mac)


def endian_swap_uint16(value: int) -> int:
    """Swap the two bytes of a 16 bit value."""
    value &= 0xFFFF
    return ((value << 8) | (value >> 8)) & 0xFFFF


def endian_swap_uint32(value: int) -> int:
    """Reverse the four bytes of a 32 bit value."""
    return int.from_bytes((value & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def bytes_to_int32(data: bytes) -> int:
    """Read a big-endian signed 32 bit integer; anything but four bytes gives 0."""
    if len(data) != 4:
        return 0
    return int.from_bytes(bytes(data), "big", signed=True)