"""Options of the ct (connection tracking) action."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address

from .attributes import (
    NativeStruct,
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    decode_attributes,
    marshal_attributes,
)
from .helpers import endian_swap_uint16, ip_to_uint32, uint32_to_ip

_TCA_CT_PARMS = 1
_TCA_CT_TM = 2
_TCA_CT_ACTION = 3
_TCA_CT_ZONE = 4
_TCA_CT_MARK = 5
_TCA_CT_MARK_MASK = 6
_TCA_CT_LABELS = 7
_TCA_CT_LABELS_MASK = 8
_TCA_CT_NAT_IPV4_MIN = 9
_TCA_CT_NAT_IPV4_MAX = 10
_TCA_CT_NAT_IPV6_MIN = 11
_TCA_CT_NAT_IPV6_MAX = 12
_TCA_CT_NAT_PORT_MIN = 13
_TCA_CT_NAT_PORT_MAX = 14
_TCA_CT_PAD = 15
_TCA_CT_HELPER_NAME = 16
_TCA_CT_HELPER_FAMILY = 17
_TCA_CT_HELPER_PROTO = 18


@dataclass
class CtParms(NativeStruct):
    """Generic parameters of the ct action."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class Ct:
    """Attributes of the ct action."""

    parms: CtParms | None = None
    tm: Tcft | None = None
    action: int | None = None
    zone: int | None = None
    mark: int | None = None
    mark_mask: int | None = None
    nat_ipv4_min: IPv4Address | None = None
    nat_ipv4_max: IPv4Address | None = None
    nat_port_min: int | None = None
    nat_port_max: int | None = None
    helper_name: str | None = None
    helper_family: int | None = None
    helper_proto: int | None = None


def unmarshal_ct(data: bytes) -> Ct:
    """Decode ct attributes."""
    info = Ct()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_CT_PARMS:
            info.parms = CtParms.unpack(attr.data)
        elif kind == _TCA_CT_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_CT_ACTION:
            info.action = attr.uint16()
        elif kind == _TCA_CT_ZONE:
            info.zone = attr.uint16()
        elif kind == _TCA_CT_MARK:
            info.mark = attr.uint32()
        elif kind == _TCA_CT_MARK_MASK:
            info.mark_mask = attr.uint32()
        elif kind == _TCA_CT_NAT_IPV4_MIN:
            info.nat_ipv4_min = uint32_to_ip(attr.uint32())
        elif kind == _TCA_CT_NAT_IPV4_MAX:
            info.nat_ipv4_max = uint32_to_ip(attr.uint32())
        elif kind == _TCA_CT_NAT_PORT_MIN:
            info.nat_port_min = endian_swap_uint16(attr.uint16())
        elif kind == _TCA_CT_NAT_PORT_MAX:
            info.nat_port_max = endian_swap_uint16(attr.uint16())
        elif kind == _TCA_CT_PAD:
            continue
        elif kind == _TCA_CT_HELPER_NAME:
            info.helper_name = attr.string()
        elif kind == _TCA_CT_HELPER_FAMILY:
            info.helper_family = attr.uint8()
        elif kind == _TCA_CT_HELPER_PROTO:
            info.helper_proto = attr.uint8()
        else:
            raise TcError(f"unmarshal_ct(): unknown attribute {kind}: {attr.data.hex()}")
    return info


def marshal_ct(info: Ct | None) -> bytes:
    """Encode ct attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Ct")
    if info.tm is not None:
        raise NoArgAlterError("Ct tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_CT_PARMS, info.parms.pack()))
    if info.action is not None:
        options.append(Option(ValueType.UINT16, _TCA_CT_ACTION, info.action))
    if info.zone is not None:
        options.append(Option(ValueType.UINT16, _TCA_CT_ZONE, info.zone))
    if info.mark is not None:
        options.append(Option(ValueType.UINT32, _TCA_CT_MARK, info.mark))
    if info.mark_mask is not None:
        options.append(Option(ValueType.UINT32, _TCA_CT_MARK_MASK, info.mark_mask))
    if info.nat_ipv4_min is not None:
        options.append(
            Option(ValueType.UINT32, _TCA_CT_NAT_IPV4_MIN, ip_to_uint32(info.nat_ipv4_min))
        )
    if info.nat_ipv4_max is not None:
        options.append(
            Option(ValueType.UINT32, _TCA_CT_NAT_IPV4_MAX, ip_to_uint32(info.nat_ipv4_max))
        )
    if info.nat_port_min is not None:
        options.append(Option(ValueType.UINT16_BE, _TCA_CT_NAT_PORT_MIN, info.nat_port_min))
    if info.nat_port_max is not None:
        options.append(Option(ValueType.UINT16_BE, _TCA_CT_NAT_PORT_MAX, info.nat_port_max))
    if info.helper_name is not None:
        options.append(Option(ValueType.STRING, _TCA_CT_HELPER_NAME, info.helper_name))
    if info.helper_family is not None:
        options.append(Option(ValueType.UINT8, _TCA_CT_HELPER_FAMILY, info.helper_family))
    if info.helper_proto is not None:
        options.append(Option(ValueType.UINT8, _TCA_CT_HELPER_PROTO, info.helper_proto))
    return marshal_attributes(options)