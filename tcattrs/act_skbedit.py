"""Options of the skbedit action."""

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

_TCA_SKBEDIT_TM = 1
_TCA_SKBEDIT_PARMS = 2
_TCA_SKBEDIT_PRIORITY = 3
_TCA_SKBEDIT_QUEUE_MAPPING = 4
_TCA_SKBEDIT_MARK = 5
_TCA_SKBEDIT_PAD = 6
_TCA_SKBEDIT_PTYPE = 7
_TCA_SKBEDIT_MASK = 8
_TCA_SKBEDIT_FLAGS = 9
_TCA_SKBEDIT_QUEUE_MAPPING_MAX = 10

# (field name, attribute type, value type) of the plain numeric attributes.
_SKBEDIT_FIELDS = (
    ("priority", _TCA_SKBEDIT_PRIORITY, ValueType.UINT32),
    ("queue_mapping", _TCA_SKBEDIT_QUEUE_MAPPING, ValueType.UINT16),
    ("mark", _TCA_SKBEDIT_MARK, ValueType.UINT32),
    ("ptype", _TCA_SKBEDIT_PTYPE, ValueType.UINT16),
    ("mask", _TCA_SKBEDIT_MASK, ValueType.UINT32),
    ("flags", _TCA_SKBEDIT_FLAGS, ValueType.UINT64),
    ("queue_mapping_max", _TCA_SKBEDIT_QUEUE_MAPPING_MAX, ValueType.UINT16),
)
_SKBEDIT_BY_TYPE = {attr_type: (name, kind) for name, attr_type, kind in _SKBEDIT_FIELDS}


@dataclass
class SkbEditParms(NativeStruct):
    """Parameters of the skbedit action, as struct tc_skbedit."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class SkbEdit:
    """Attributes of the skbedit action."""

    tm: Tcft | None = None
    parms: SkbEditParms | None = None
    priority: int | None = None
    queue_mapping: int | None = None
    mark: int | None = None
    ptype: int | None = None
    mask: int | None = None
    flags: int | None = None
    queue_mapping_max: int | None = None


def unmarshal_skbedit(data: bytes) -> SkbEdit:
    """Decode skbedit attributes."""
    info = SkbEdit()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_SKBEDIT_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_SKBEDIT_PARMS:
            info.parms = SkbEditParms.unpack(attr.data)
        elif kind == _TCA_SKBEDIT_PAD:
            continue
        elif kind in _SKBEDIT_BY_TYPE:
            name, value_type = _SKBEDIT_BY_TYPE[kind]
            if value_type is ValueType.UINT16:
                value = attr.uint16()
            elif value_type is ValueType.UINT32:
                value = attr.uint32()
            else:
                value = attr.uint64()
            setattr(info, name, value)
        else:
            raise TcError(f"unmarshal_skbedit(): unknown attribute {kind}: {attr.data.hex()}")
    return info


def marshal_skbedit(info: SkbEdit | None) -> bytes:
    """Encode skbedit attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("SkbEdit")
    if info.tm is not None:
        raise NoArgAlterError("SkbEdit tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_SKBEDIT_PARMS, info.parms.pack()))
    options.extend(
        Option(kind, attr_type, getattr(info, name))
        for name, attr_type, kind in _SKBEDIT_FIELDS
        if getattr(info, name) is not None
    )
    return marshal_attributes(options)