import pytest

from tcattrs.act_skbedit import (
    SkbEdit,
    SkbEditParms,
    marshal_skbedit,
    unmarshal_skbedit,
)
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    Tcft,
    ValueType,
    marshal_attributes,
)

_TM = 1
_PAD = 6


def _enrich(data: bytes) -> tuple[bytes, Tcft]:
    tm = Tcft(1, 2, 3, 4)
    extra = marshal_attributes(
        [
            Option(ValueType.BYTES, _TM, tm.pack()),
            Option(ValueType.BYTES, _PAD, b""),
        ]
    )
    return data + extra, tm


@pytest.mark.parametrize(
    "value",
    [
        SkbEdit(parms=SkbEditParms(bind_cnt=111)),
        SkbEdit(
            parms=SkbEditParms(index=222),
            priority=11,
            queue_mapping=12,
            mark=13,
            ptype=14,
            mask=15,
            flags=16,
            queue_mapping_max=17,
        ),
    ],
    ids=["simple", "all arguments"],
)
def test_round_trip(value):
    data, tm = _enrich(marshal_skbedit(value))
    result = unmarshal_skbedit(data)
    value.tm = tm
    assert result == value


def test_priority_encoding():
    assert marshal_skbedit(SkbEdit(priority=42)) == bytes(
        [0x08, 0x00, 0x03, 0x00, 0x2A, 0x00, 0x00, 0x00]
    )


def test_nil():
    with pytest.raises(NoArgError):
        marshal_skbedit(None)


def test_alter_tm():
    with pytest.raises(NoArgAlterError):
        marshal_skbedit(SkbEdit(tm=Tcft(73, 0, 0, 0)))