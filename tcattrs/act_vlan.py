"""Options of the vlan action."""

from __future__ import annotations

from dataclasses import dataclass

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

_TCA_VLAN_TM = 1
_TCA_VLAN_PARMS = 2
_TCA_VLAN_PUSH_VLAN_ID = 3
_TCA_VLAN_PUSH_VLAN_PROTOCOL = 4
_TCA_VLAN_PAD = 5
_TCA_VLAN_PUSH_VLAN_PRIORITY = 6


@dataclass
class VLanParms(NativeStruct):
    """Parameters of the vlan action, as struct tc_vlan."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    vlan_action: int = 0
    _layout = ("I", "I", "I", "I", "I", "I")


@dataclass
class VLan:
    """Attributes of the vlan action."""

    parms: VLanParms | None = None
    tm: Tcft | None = None
    push_id: int | None = None
    push_protocol: int | None = None
    push_priority: int | None = None


def marshal_vlan(info: VLan | None) -> bytes:
    """Encode vlan attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("VLan")
    if info.tm is not None:
        raise NoArgAlterError("VLan tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_VLAN_PARMS, info.parms.pack()))
    if info.push_id is not None:
        options.append(Option(ValueType.UINT16, _TCA_VLAN_PUSH_VLAN_ID, info.push_id))
    if info.push_protocol is not None:
        options.append(
            Option(ValueType.UINT16, _TCA_VLAN_PUSH_VLAN_PROTOCOL, info.push_protocol)
        )
    if info.push_priority is not None:
        options.append(
            Option(ValueType.UINT32, _TCA_VLAN_PUSH_VLAN_PRIORITY, info.push_priority)
        )
    return marshal_attributes(options)


def unmarshal_vlan(data: bytes) -> VLan:
    """Decode vlan attributes."""
    info = VLan()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_VLAN_PARMS:
            info.parms = VLanParms.unpack(attr.data)
        elif kind == _TCA_VLAN_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_VLAN_PUSH_VLAN_ID:
            info.push_id = attr.uint16()
        elif kind == _TCA_VLAN_PUSH_VLAN_PROTOCOL:
            info.push_protocol = attr.uint16()
        elif kind == _TCA_VLAN_PUSH_VLAN_PRIORITY:
            info.push_priority = attr.uint32()
        elif kind == _TCA_VLAN_PAD:
            continue
        else:
            raise TcError(f"unmarshal_vlan(): unknown attribute {kind}: {attr.data.hex()}")
    return info