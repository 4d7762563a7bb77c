import pytest

from tcattrs.act_connmark import Connmark, ConnmarkParam, marshal_connmark, unmarshal_connmark
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    marshal_attributes,
)

CONNMARK_TM = 2
CONNMARK_PAD = 3


def inject_tcft(data, attr_type):
    tm = Tcft(install=9, last_use=8, expires=7, first_use=6)
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, tm.pack())]), tm


def inject_attribute(data, payload, attr_type):
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, payload)])


def test_round_trip():
    parms = ConnmarkParam(index=42, action=1)
    data = marshal_connmark(Connmark(parms=parms))
    data, tm = inject_tcft(data, CONNMARK_TM)
    data = inject_attribute(data, b"", CONNMARK_PAD)
    assert unmarshal_connmark(data) == Connmark(parms=parms, tm=tm)


def test_round_trip_with_zone():
    parms = ConnmarkParam(index=3, zone=0xBEEF)
    assert unmarshal_connmark(marshal_connmark(Connmark(parms=parms))) == Connmark(parms=parms)


def test_parms_are_aligned():
    data = marshal_connmark(Connmark(parms=ConnmarkParam(zone=1)))
    assert data[:4] == bytes([0x1C, 0x0, 0x1, 0x0])
    assert len(data) == 28


def test_tm_cannot_be_altered():
    with pytest.raises(NoArgAlterError):
        marshal_connmark(Connmark(tm=Tcft(install=1)))


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_connmark(None)


def test_unknown_attribute():
    with pytest.raises(TcError):
        unmarshal_connmark(marshal_attributes([Option(ValueType.UINT32, 9, 1)]))