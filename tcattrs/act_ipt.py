"""Options of the ipt action."""

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

_TCA_IPT_TABLE = 1
_TCA_IPT_HOOK = 2
_TCA_IPT_INDEX = 3
_TCA_IPT_CNT = 4
_TCA_IPT_TM = 5
_TCA_IPT_TARG = 6
_TCA_IPT_PAD = 7


@dataclass
class IptCnt(NativeStruct):
    """Reference counters, as struct tc_cnt."""

    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I")


@dataclass
class Ipt:
    """Attributes of the ipt action."""

    table: str | None = None
    hook: int | None = None
    index: int | None = None
    cnt: IptCnt | None = None
    tm: Tcft | None = None


def unmarshal_ipt(data: bytes) -> Ipt:
    """Decode ipt attributes."""
    info = Ipt()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_IPT_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_IPT_TABLE:
            info.table = attr.string()
        elif attr.attr_type == _TCA_IPT_HOOK:
            info.hook = attr.uint32()
        elif attr.attr_type == _TCA_IPT_INDEX:
            info.index = attr.uint32()
        elif attr.attr_type == _TCA_IPT_CNT:
            info.cnt = IptCnt.unpack(attr.data)
        elif attr.attr_type == _TCA_IPT_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_ipt(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info


def marshal_ipt(info: Ipt | None) -> bytes:
    """Encode ipt attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Ipt")
    if info.tm is not None:
        raise NoArgAlterError("Ipt tm")
    options = []
    if info.table is not None:
        options.append(Option(ValueType.STRING, _TCA_IPT_TABLE, info.table))
    if info.hook is not None:
        options.append(Option(ValueType.UINT32, _TCA_IPT_HOOK, info.hook))
    if info.index is not None:
        options.append(Option(ValueType.UINT32, _TCA_IPT_INDEX, info.index))
    if info.cnt is not None:
        options.append(Option(ValueType.BYTES, _TCA_IPT_CNT, info.cnt.pack()))
    return marshal_attributes(options)