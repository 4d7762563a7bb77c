"""Options of the ets (Enhanced Transmission Selection) discipline."""

from __future__ import annotations

from dataclasses import dataclass

from .attributes import (
    NoArgError,
    Option,
    TcError,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

_TCA_ETS_NBANDS = 1
_TCA_ETS_NSTRICT = 2
_TCA_ETS_QUANTA = 3
_TCA_ETS_QUANTA_BAND = 4
_TCA_ETS_PRIOMAP = 5
_TCA_ETS_PRIOMAP_BAND = 6


@dataclass
class Ets:
    """Attributes of the ets discipline."""

    nbands: int | None = None
    nstrict: int | None = None
    quanta: list[int] | None = None
    prio_map: list[int] | None = None


def _unknown(where: str, attr) -> TcError:
    return TcError(f"{where}(): unknown attribute {attr.attr_type}: {attr.data.hex()}")


def unmarshal_ets_quanta(data: bytes) -> list[int]:
    """Decode the nested list of band quanta."""
    quanta = []
    for attr in decode_attributes(data):
        if attr.attr_type != _TCA_ETS_QUANTA_BAND:
            raise _unknown("unmarshal_ets_quanta", attr)
        quanta.append(attr.uint32())
    return quanta


def marshal_ets_quanta(quanta: list[int] | None) -> bytes:
    """Encode band quanta as a nested list."""
    if quanta is None:
        raise NoArgError("marshal_ets_quanta")
    return marshal_attributes(
        Option(ValueType.UINT32, _TCA_ETS_QUANTA_BAND, band) for band in quanta
    )


def unmarshal_ets_prio_map(data: bytes) -> list[int]:
    """Decode the nested priority to band map."""
    prio_map = []
    for attr in decode_attributes(data):
        if attr.attr_type != _TCA_ETS_PRIOMAP_BAND:
            raise _unknown("unmarshal_ets_prio_map", attr)
        prio_map.append(attr.uint8())
    return prio_map


def marshal_ets_prio_map(prio_map: list[int] | None) -> bytes:
    """Encode the priority to band map as a nested list."""
    if prio_map is None:
        raise NoArgError("marshal_ets_prio_map")
    return marshal_attributes(
        Option(ValueType.UINT8, _TCA_ETS_PRIOMAP_BAND, band) for band in prio_map
    )


def unmarshal_ets(data: bytes) -> Ets:
    """Decode ets attributes."""
    info = Ets()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_ETS_NBANDS:
            info.nbands = attr.uint8()
        elif attr.attr_type == _TCA_ETS_NSTRICT:
            info.nstrict = attr.uint8()
        elif attr.attr_type == _TCA_ETS_QUANTA:
            info.quanta = unmarshal_ets_quanta(attr.data)
        elif attr.attr_type == _TCA_ETS_PRIOMAP:
            info.prio_map = unmarshal_ets_prio_map(attr.data)
        else:
            raise _unknown("unmarshal_ets", attr)
    return info


def marshal_ets(info: Ets | None) -> bytes:
    """Encode ets attributes."""
    if info is None:
        raise NoArgError("Ets")
    options = []
    if info.nbands is not None:
        options.append(Option(ValueType.UINT8, _TCA_ETS_NBANDS, info.nbands))
    if info.nstrict is not None:
        options.append(Option(ValueType.UINT8, _TCA_ETS_NSTRICT, info.nstrict))
    if info.quanta is not None:
        options.append(
            Option(ValueType.BYTES, _TCA_ETS_QUANTA, marshal_ets_quanta(info.quanta))
        )
    if info.prio_map is not None:
        options.append(
            Option(ValueType.BYTES, _TCA_ETS_PRIOMAP, marshal_ets_prio_map(info.prio_map))
        )
    return marshal_attributes(options)