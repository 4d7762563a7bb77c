"""Options of the bpf action."""

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

_TCA_ACT_BPF_TM = 1
_TCA_ACT_BPF_PARMS = 2
_TCA_ACT_BPF_OPS_LEN = 3
_TCA_ACT_BPF_OPS = 4
_TCA_ACT_BPF_FD = 5
_TCA_ACT_BPF_NAME = 6
_TCA_ACT_BPF_PAD = 7
_TCA_ACT_BPF_TAG = 8
_TCA_ACT_BPF_ID = 9


@dataclass
class ActBpfParms(NativeStruct):
    """Generic action parameters, as struct tc_act_bpf."""

    index: int = 0
    capab: int = 0
    action: int = 0
    refcnt: int = 0
    bindcnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class ActBpf:
    """Attributes of the bpf action."""

    tm: Tcft | None = None
    parms: ActBpfParms | None = None
    ops: bytes | None = None
    ops_len: int | None = None
    fd: int | None = None
    name: str | None = None
    tag: bytes | None = None
    id: int | None = None


def unmarshal_act_bpf(data: bytes) -> ActBpf:
    """Decode bpf action attributes."""
    info = ActBpf()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_ACT_BPF_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_ACT_BPF_PARMS:
            info.parms = ActBpfParms.unpack(attr.data)
        elif kind == _TCA_ACT_BPF_OPS_LEN:
            info.ops_len = attr.uint16()
        elif kind == _TCA_ACT_BPF_OPS:
            info.ops = attr.data
        elif kind == _TCA_ACT_BPF_FD:
            info.fd = attr.uint32()
        elif kind == _TCA_ACT_BPF_NAME:
            info.name = attr.string()
        elif kind == _TCA_ACT_BPF_TAG:
            info.tag = attr.data
        elif kind == _TCA_ACT_BPF_ID:
            info.id = attr.uint32()
        elif kind == _TCA_ACT_BPF_PAD:
            continue
        else:
            raise TcError(f"unmarshal_act_bpf(): unknown attribute {kind}: {attr.data.hex()}")
    return info


def marshal_act_bpf(info: ActBpf | None) -> bytes:
    """Encode bpf action attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("ActBpf")
    if info.tm is not None:
        raise NoArgAlterError("ActBpf tm")
    options = []
    if info.name is not None:
        options.append(Option(ValueType.STRING, _TCA_ACT_BPF_NAME, info.name))
    if info.tag is not None:
        options.append(Option(ValueType.BYTES, _TCA_ACT_BPF_TAG, info.tag))
    if info.fd is not None:
        options.append(Option(ValueType.UINT32, _TCA_ACT_BPF_FD, info.fd))
    if info.id is not None:
        options.append(Option(ValueType.UINT32, _TCA_ACT_BPF_ID, info.id))
    if info.ops is not None:
        options.append(Option(ValueType.BYTES, _TCA_ACT_BPF_OPS, info.ops))
    if info.ops_len is not None:
        options.append(Option(ValueType.UINT16, _TCA_ACT_BPF_OPS_LEN, info.ops_len))
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_ACT_BPF_PARMS, info.parms.pack()))
    return marshal_attributes(options)