from dataclasses import replace

import pytest

from tcattrs.act_gate import Gate, GateParms, marshal_gate, unmarshal_gate
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    marshal_attributes,
)

GATE_TM = 1
GATE_PAD = 3


def _inject(data, attr_type, payload):
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, payload)])


def _inject_tcft(data, attr_type):
    tm = Tcft(install=1, last_use=2, expires=3, first_use=4)
    return _inject(data, attr_type, tm.pack()), tm


@pytest.mark.parametrize(
    "value",
    [
        Gate(),
        Gate(
            parms=GateParms(index=1),
            priority=2,
            base_time=3,
            cycle_time=4,
            cycle_time_ext=5,
            flags=6,
            clock_id=-7,
        ),
    ],
)
def test_round_trip(value):
    data = marshal_gate(value)
    data, tm = _inject_tcft(data, GATE_TM)
    data = _inject(data, GATE_PAD, b"")
    assert unmarshal_gate(data) == replace(value, tm=tm)


def test_tm_cannot_be_altered():
    with pytest.raises(NoArgAlterError):
        marshal_gate(Gate(tm=Tcft(install=1)))


def test_marshal_nil():
    with pytest.raises(NoArgError):
        marshal_gate(None)


def test_unmarshal_truncated():
    with pytest.raises(TcError):
        unmarshal_gate(b"\x00")


def test_entry_list_is_rejected():
    data = marshal_attributes([Option(ValueType.BYTES, 5, b"\x00\x00\x00\x00")])
    with pytest.raises(TcError):
        unmarshal_gate(data)