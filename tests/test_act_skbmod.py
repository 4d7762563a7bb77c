import pytest

from tcattrs.act_skbmod import SkbMod, SkbModParms, marshal_skbmod, unmarshal_skbmod
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

SKBMOD_TM = 1
SKBMOD_PARMS = 2
SKBMOD_PAD = 6
SRC_MAC = bytes.fromhex("020000000001")
DST_MAC = bytes.fromhex("020000000002")


def _enrich(data):
    tm = Tcft(install=1, last_use=2, expires=3, first_use=4)
    extra = marshal_attributes(
        [
            Option(ValueType.BYTES, SKBMOD_TM, tm.pack()),
            Option(ValueType.BYTES, SKBMOD_PAD, b""),
        ]
    )
    return data + extra, tm


def test_simple_round_trip():
    value = SkbMod(parms=SkbModParms(index=42), smac=SRC_MAC, dmac=DST_MAC, etype=13)
    data, tm = _enrich(marshal_skbmod(value))
    got = unmarshal_skbmod(data)
    value.tm = tm
    assert got == value


def test_parms_are_packed():
    attrs = decode_attributes(marshal_skbmod(SkbMod(parms=SkbModParms(flags=1))))
    assert attrs[0].attr_type == SKBMOD_PARMS
    assert len(attrs[0].data) == 28


def test_alter_tm():
    with pytest.raises(NoArgAlterError):
        marshal_skbmod(SkbMod(tm=Tcft(install=1)))


def test_nil():
    with pytest.raises(NoArgError):
        marshal_skbmod(None)


def test_unknown_attribute():
    with pytest.raises(TcError):
        unmarshal_skbmod(marshal_attributes([Option(ValueType.UINT16, 12, 1)]))