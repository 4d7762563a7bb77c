"""Options of the gate action."""

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

_TCA_GATE_TM = 1
_TCA_GATE_PARMS = 2
_TCA_GATE_PAD = 3
_TCA_GATE_PRIORITY = 4
_TCA_GATE_ENTRY_LIST = 5
_TCA_GATE_BASE_TIME = 6
_TCA_GATE_CYCLE_TIME = 7
_TCA_GATE_CYCLE_TIME_EXT = 8
_TCA_GATE_FLAGS = 9
_TCA_GATE_CLOCKID = 10


@dataclass
class GateParms(NativeStruct):
    """Parameters of the gate action, as struct tc_gate."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class Gate:
    """Attributes of the gate action."""

    tm: Tcft | None = None
    parms: GateParms | None = None
    priority: int | None = None
    base_time: int | None = None
    cycle_time: int | None = None
    cycle_time_ext: int | None = None
    flags: int | None = None
    clock_id: int | None = None


def marshal_gate(info: Gate | None) -> bytes:
    """Encode gate attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Gate")
    if info.tm is not None:
        raise NoArgAlterError("Gate tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_GATE_PARMS, info.parms.pack()))
    if info.priority is not None:
        options.append(Option(ValueType.INT32, _TCA_GATE_PRIORITY, info.priority))
    if info.base_time is not None:
        options.append(Option(ValueType.UINT64, _TCA_GATE_BASE_TIME, info.base_time))
    if info.cycle_time is not None:
        options.append(Option(ValueType.UINT64, _TCA_GATE_CYCLE_TIME, info.cycle_time))
    if info.cycle_time_ext is not None:
        options.append(
            Option(ValueType.UINT64, _TCA_GATE_CYCLE_TIME_EXT, info.cycle_time_ext)
        )
    if info.flags is not None:
        options.append(Option(ValueType.UINT32, _TCA_GATE_FLAGS, info.flags))
    if info.clock_id is not None:
        options.append(Option(ValueType.INT32, _TCA_GATE_CLOCKID, info.clock_id))
    return marshal_attributes(options)


def unmarshal_gate(data: bytes) -> Gate:
    """Decode gate attributes."""
    info = Gate()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_GATE_PARMS:
            info.parms = GateParms.unpack(attr.data)
        elif kind == _TCA_GATE_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_GATE_PAD:
            continue
        elif kind == _TCA_GATE_PRIORITY:
            info.priority = attr.int32()
        elif kind == _TCA_GATE_BASE_TIME:
            info.base_time = attr.uint64()
        elif kind == _TCA_GATE_CYCLE_TIME:
            info.cycle_time = attr.uint64()
        elif kind == _TCA_GATE_CYCLE_TIME_EXT:
            info.cycle_time_ext = attr.uint64()
        elif kind == _TCA_GATE_FLAGS:
            info.flags = attr.uint32()
        elif kind == _TCA_GATE_CLOCKID:
            info.clock_id = attr.int32()
        else:
            raise TcError(f"unmarshal_gate(): unknown attribute {kind}: {attr.data.hex()}")
    return info