"""Options of the tunnel_key action."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from .attributes import (
    InvalidArgError,
    NativeStruct,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    decode_attributes,
    marshal_attributes,
)
from .helpers import endian_swap_uint16, endian_swap_uint32, ip_to_uint32, uint32_to_ip

_TCA_TUNNEL_KEY_TM = 1
_TCA_TUNNEL_KEY_PARMS = 2
_TCA_TUNNEL_KEY_ENC_IPV4_SRC = 3
_TCA_TUNNEL_KEY_ENC_IPV4_DST = 4
_TCA_TUNNEL_KEY_ENC_IPV6_SRC = 5
_TCA_TUNNEL_KEY_ENC_IPV6_DST = 6
_TCA_TUNNEL_KEY_ENC_KEY_ID = 7
_TCA_TUNNEL_KEY_PAD = 8
_TCA_TUNNEL_KEY_ENC_DST_PORT = 9
_TCA_TUNNEL_KEY_NO_CSUM = 10
_TCA_TUNNEL_KEY_ENC_OPTS = 11
_TCA_TUNNEL_KEY_ENC_TOS = 12
_TCA_TUNNEL_KEY_ENC_TTL = 13
_TCA_TUNNEL_KEY_NO_FRAG = 14

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass
class TunnelParms(NativeStruct):
    """Parameters of the tunnel_key action, as struct tc_tunnel_key."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    tunnel_key_action: int = 0
    _layout = ("I", "I", "I", "I", "I", "I")


@dataclass
class TunnelKey:
    """Attributes of the tunnel_key action."""

    parms: TunnelParms | None = None
    tm: Tcft | None = None
    key_enc_src: IPAddress | None = None
    key_enc_dst: IPAddress | None = None
    key_enc_key_id: int | None = None
    key_enc_dst_port: int | None = None
    key_no_csum: int | None = None
    key_enc_tos: int | None = None
    key_enc_ttl: int | None = None
    key_no_frag: bool | None = None


def _address_option(ip, v4_type: int, v6_type: int) -> Option:
    """Encode an address as a legacy IPv4 value where possible, else as raw bytes."""
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError as exc:
        raise InvalidArgError(f"TunnelKey address: {exc}") from exc
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        addr = addr.ipv4_mapped
    if isinstance(addr, ipaddress.IPv4Address):
        return Option(ValueType.UINT32, v4_type, ip_to_uint32(addr))
    return Option(ValueType.BYTES, v6_type, addr.packed)


def _decode_ip(data: bytes) -> IPAddress:
    if len(data) not in (4, 16):
        raise InvalidArgError(f"TunnelKey address of {len(data)} bytes")
    return ipaddress.ip_address(bytes(data))


def marshal_tunnel_key(info: TunnelKey | None) -> bytes:
    """Encode tunnel_key attributes; the timestamps are not sent."""
    if info is None:
        raise NoArgError("TunnelKey")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_TUNNEL_KEY_PARMS, info.parms.pack()))
    if info.key_enc_src is not None:
        options.append(
            _address_option(
                info.key_enc_src, _TCA_TUNNEL_KEY_ENC_IPV4_SRC, _TCA_TUNNEL_KEY_ENC_IPV6_SRC
            )
        )
    if info.key_enc_dst is not None:
        options.append(
            _address_option(
                info.key_enc_dst, _TCA_TUNNEL_KEY_ENC_IPV4_DST, _TCA_TUNNEL_KEY_ENC_IPV6_DST
            )
        )
    if info.key_enc_key_id is not None:
        options.append(
            Option(ValueType.UINT32_BE, _TCA_TUNNEL_KEY_ENC_KEY_ID, info.key_enc_key_id)
        )
    if info.key_enc_dst_port is not None:
        options.append(
            Option(ValueType.UINT16_BE, _TCA_TUNNEL_KEY_ENC_DST_PORT, info.key_enc_dst_port)
        )
    if info.key_no_csum is not None:
        options.append(Option(ValueType.UINT8, _TCA_TUNNEL_KEY_NO_CSUM, info.key_no_csum))
    if info.key_enc_tos is not None:
        options.append(Option(ValueType.UINT8, _TCA_TUNNEL_KEY_ENC_TOS, info.key_enc_tos))
    if info.key_enc_ttl is not None:
        options.append(Option(ValueType.UINT8, _TCA_TUNNEL_KEY_ENC_TTL, info.key_enc_ttl))
    if info.key_no_frag is not None:
        options.append(Option(ValueType.FLAG, _TCA_TUNNEL_KEY_NO_FRAG, info.key_no_frag))
    return marshal_attributes(options)


def unmarshal_tunnel_key(data: bytes) -> TunnelKey:
    """Decode tunnel_key attributes."""
    info = TunnelKey()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_TUNNEL_KEY_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_TUNNEL_KEY_PARMS:
            info.parms = TunnelParms.unpack(attr.data)
        elif kind == _TCA_TUNNEL_KEY_ENC_IPV4_SRC:
            info.key_enc_src = uint32_to_ip(attr.uint32())
        elif kind == _TCA_TUNNEL_KEY_ENC_IPV4_DST:
            info.key_enc_dst = uint32_to_ip(attr.uint32())
        elif kind == _TCA_TUNNEL_KEY_ENC_IPV6_SRC:
            info.key_enc_src = _decode_ip(attr.data)
        elif kind == _TCA_TUNNEL_KEY_ENC_IPV6_DST:
            info.key_enc_dst = _decode_ip(attr.data)
        elif kind == _TCA_TUNNEL_KEY_ENC_KEY_ID:
            info.key_enc_key_id = endian_swap_uint32(attr.uint32())
        elif kind == _TCA_TUNNEL_KEY_ENC_DST_PORT:
            info.key_enc_dst_port = endian_swap_uint16(attr.uint16())
        elif kind == _TCA_TUNNEL_KEY_NO_CSUM:
            info.key_no_csum = attr.uint8()
        elif kind == _TCA_TUNNEL_KEY_ENC_TOS:
            info.key_enc_tos = attr.uint8()
        elif kind == _TCA_TUNNEL_KEY_ENC_TTL:
            info.key_enc_ttl = attr.uint8()
        elif kind == _TCA_TUNNEL_KEY_PAD:
            continue
        elif kind == _TCA_TUNNEL_KEY_NO_FRAG:
            info.key_no_frag = attr.flag()
        else:
            raise TcError(
                f"unmarshal_tunnel_key(): unknown attribute {kind}: {attr.data.hex()}"
            )
    return info