"""Options of the ctinfo action."""

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

_TCA_CTINFO_PAD = 1
_TCA_CTINFO_TM = 2
_TCA_CTINFO_ACT = 3
_TCA_CTINFO_ZONE = 4
_TCA_CTINFO_PARMS_DSCP_MASK = 5
_TCA_CTINFO_PARMS_DSCP_STATEMASK = 6
_TCA_CTINFO_PARMS_CPMARK_MASK = 7
_TCA_CTINFO_STATS_DSCP_SET = 8
_TCA_CTINFO_STATS_DSCP_ERROR = 9
_TCA_CTINFO_STATS_CPMARK_SET = 10

# (field name, attribute type, value type) of the plain numeric attributes.
_CTINFO_FIELDS = (
    ("zone", _TCA_CTINFO_ZONE, ValueType.UINT16),
    ("parms_dscp_mask", _TCA_CTINFO_PARMS_DSCP_MASK, ValueType.UINT32),
    ("parms_dscp_state_mask", _TCA_CTINFO_PARMS_DSCP_STATEMASK, ValueType.UINT32),
    ("parms_cp_mark_mask", _TCA_CTINFO_PARMS_CPMARK_MASK, ValueType.UINT32),
    ("stats_dscp_set", _TCA_CTINFO_STATS_DSCP_SET, ValueType.UINT64),
    ("stats_dscp_error", _TCA_CTINFO_STATS_DSCP_ERROR, ValueType.UINT64),
    ("stats_cp_mark_set", _TCA_CTINFO_STATS_CPMARK_SET, ValueType.UINT64),
)
_CTINFO_BY_TYPE = {attr_type: (name, kind) for name, attr_type, kind in _CTINFO_FIELDS}


@dataclass
class CtInfoAct(NativeStruct):
    """Generic parameters of the ctinfo action, as struct tc_ctinfo."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class CtInfo:
    """Attributes of the ctinfo action."""

    tm: Tcft | None = None
    act: CtInfoAct | None = None
    zone: int | None = None
    parms_dscp_mask: int | None = None
    parms_dscp_state_mask: int | None = None
    parms_cp_mark_mask: int | None = None
    stats_dscp_set: int | None = None
    stats_dscp_error: int | None = None
    stats_cp_mark_set: int | None = None


def unmarshal_ctinfo(data: bytes) -> CtInfo:
    """Decode ctinfo attributes."""
    info = CtInfo()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_CTINFO_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_CTINFO_ACT:
            info.act = CtInfoAct.unpack(attr.data)
        elif kind == _TCA_CTINFO_PAD:
            continue
        elif kind in _CTINFO_BY_TYPE:
            name, value_type = _CTINFO_BY_TYPE[kind]
            if value_type is ValueType.UINT16:
                value = attr.uint16()
            elif value_type is ValueType.UINT32:
                value = attr.uint32()
            else:
                value = attr.uint64()
            setattr(info, name, value)
        else:
            raise TcError(f"unmarshal_ctinfo(): unknown attribute {kind}: {attr.data.hex()}")
    return info


def marshal_ctinfo(info: CtInfo | None) -> bytes:
    """Encode ctinfo attributes; the timestamps cannot be set.

    Parameters that cannot be packed give an empty encoding.
    """
    if info is None:
        raise NoArgError("CtInfo")
    if info.tm is not None:
        raise NoArgAlterError("CtInfo tm")
    options = []
    if info.act is not None:
        try:
            packed = info.act.pack()
        except TcError:
            return b""
        options.append(Option(ValueType.BYTES, _TCA_CTINFO_ACT, packed))
    options.extend(
        Option(kind, attr_type, getattr(info, name))
        for name, attr_type, kind in _CTINFO_FIELDS
        if getattr(info, name) is not None
    )
    return marshal_attributes(options)