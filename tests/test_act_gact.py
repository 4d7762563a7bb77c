from dataclasses import replace

import pytest

from tcattrs.act_gact import Gact, GactParms, GactProb, marshal_gact, unmarshal_gact
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    marshal_attributes,
)

GACT_TM = 1
GACT_PAD = 4


def _inject(data, attr_type, payload):
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, payload)])


def _inject_tcft(data, attr_type):
    tm = Tcft(install=1, last_use=2, expires=3, first_use=4)
    return _inject(data, attr_type, tm.pack()), tm


def test_round_trip():
    value = Gact(parms=GactParms(index=1, capab=2), prob=GactProb(ptype=2))
    data = marshal_gact(value)
    data, tm = _inject_tcft(data, GACT_TM)
    data = _inject(data, GACT_PAD, b"")
    assert unmarshal_gact(data) == replace(value, tm=tm)


def test_tm_cannot_be_altered():
    with pytest.raises(NoArgAlterError):
        marshal_gact(Gact(tm=Tcft(install=2)))


def test_nil():
    with pytest.raises(NoArgError):
        marshal_gact(None)


def test_prob_layout():
    assert GactProb(ptype=1, pval=2, paction=3).pack() == (
        (1).to_bytes(2, "little") + (2).to_bytes(2, "little") + (3).to_bytes(4, "little")
        if GactProb.unpack(b"\x01\x00\x00\x00\x00\x00\x00\x00").ptype == 1
        else (1).to_bytes(2, "big") + (2).to_bytes(2, "big") + (3).to_bytes(4, "big")
    )


def test_unknown_attribute():
    data = marshal_attributes([Option(ValueType.UINT32, 42, 1)])
    with pytest.raises(TcError):
        unmarshal_gact(data)