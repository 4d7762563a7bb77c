"""Options of the sample action."""

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

_TCA_SAMPLE_TM = 1
_TCA_SAMPLE_PARMS = 2
_TCA_SAMPLE_RATE = 3
_TCA_SAMPLE_TRUNC_SIZE = 4
_TCA_SAMPLE_PSAMPLE_GROUP = 5
_TCA_SAMPLE_PAD = 6


@dataclass
class SampleParms(NativeStruct):
    """Parameters of the sample action, as struct tc_sample."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class Sample:
    """Attributes of the sample action."""

    parms: SampleParms | None = None
    tm: Tcft | None = None
    rate: int | None = None
    trunc_size: int | None = None
    sample_group: int | None = None


def marshal_sample(info: Sample | None) -> bytes:
    """Encode sample attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Sample")
    if info.tm is not None:
        raise NoArgAlterError("Sample tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_SAMPLE_PARMS, info.parms.pack()))
    if info.rate is not None:
        options.append(Option(ValueType.UINT32, _TCA_SAMPLE_RATE, info.rate))
    if info.trunc_size is not None:
        options.append(Option(ValueType.UINT32, _TCA_SAMPLE_TRUNC_SIZE, info.trunc_size))
    if info.sample_group is not None:
        options.append(
            Option(ValueType.UINT32, _TCA_SAMPLE_PSAMPLE_GROUP, info.sample_group)
        )
    return marshal_attributes(options)


def unmarshal_sample(data: bytes) -> Sample:
    """Decode sample attributes."""
    info = Sample()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_SAMPLE_PARMS:
            info.parms = SampleParms.unpack(attr.data)
        elif attr.attr_type == _TCA_SAMPLE_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_SAMPLE_RATE:
            info.rate = attr.uint32()
        elif attr.attr_type == _TCA_SAMPLE_TRUNC_SIZE:
            info.trunc_size = attr.uint32()
        elif attr.attr_type == _TCA_SAMPLE_PSAMPLE_GROUP:
            info.sample_group = attr.uint32()
        elif attr.attr_type == _TCA_SAMPLE_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_sample(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info