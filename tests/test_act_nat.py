from dataclasses import replace

import pytest

from tcattrs.act_nat import Nat, NatParms, marshal_nat, unmarshal_nat
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    marshal_attributes,
)

NAT_TM = 2
NAT_PAD = 3


def _inject(data, attr_type, payload):
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, payload)])


def _inject_tcft(data, attr_type):
    tm = Tcft(install=1, last_use=2, expires=3, first_use=4)
    return _inject(data, attr_type, tm.pack()), tm


def test_round_trip():
    value = Nat(parms=NatParms(index=42, action=1))
    data = marshal_nat(value)
    data, tm = _inject_tcft(data, NAT_TM)
    data = _inject(data, NAT_PAD, b"")
    assert unmarshal_nat(data) == replace(value, tm=tm)


def test_tm_cannot_be_altered():
    with pytest.raises(NoArgAlterError):
        marshal_nat(Nat(tm=Tcft(install=1)))


def test_nil():
    with pytest.raises(NoArgError):
        marshal_nat(None)


def test_empty_encodes_to_nothing():
    assert marshal_nat(Nat()) == b""


def test_short_parms_is_an_error():
    data = marshal_attributes([Option(ValueType.BYTES, 1, b"\x00" * 8)])
    with pytest.raises(TcError):
        unmarshal_nat(data)