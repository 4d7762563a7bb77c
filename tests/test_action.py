import pytest

from tcattrs.act_bpf import ActBpf, ActBpfParms
from tcattrs.act_connmark import Connmark, ConnmarkParam
from tcattrs.act_csum import Csum, CsumParms
from tcattrs.act_ct import Ct
from tcattrs.act_ctinfo import CtInfo
from tcattrs.act_defact import Defact, DefactParms
from tcattrs.act_gact import Gact, GactParms, GactProb
from tcattrs.act_gate import Gate, GateParms
from tcattrs.act_ife import Ife, IfeParms
from tcattrs.act_ipt import Ipt
from tcattrs.act_mirred import Mirred, MirredParam
from tcattrs.act_mpls import MPLS
from tcattrs.act_nat import Nat, NatParms
from tcattrs.act_sample import Sample, SampleParms
from tcattrs.act_skbedit import SkbEdit
from tcattrs.act_skbmod import SkbMod
from tcattrs.act_tunnel_key import TunnelKey
from tcattrs.act_vlan import VLan, VLanParms
from tcattrs.action import (
    Action,
    extract_act_options,
    marshal_action,
    marshal_actions,
    unmarshal_action,
    unmarshal_actions,
)
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
from tcattrs.constants import RTM_DELACTION

ROUND_TRIP_CASES = {
    "bpf without options": Action(kind="bpf", index=123),
    "simple bpf": Action(
        kind="bpf",
        bpf=ActBpf(fd=12, name="simpleTest", parms=ActBpfParms(action=2, index=4)),
        flags=73,
    ),
    "connmark": Action(kind="connmark", connmark=Connmark(parms=ConnmarkParam(index=42, action=1))),
    "csum": Action(kind="csum", csum=Csum(parms=CsumParms(index=1, capab=2))),
    "ct": Action(kind="ct", ct=Ct(zone=42)),
    "ctinfo": Action(kind="ctinfo", ctinfo=CtInfo(zone=1337)),
    "defact": Action(kind="defact", defact=Defact(parms=DefactParms(index=42, action=1))),
    "ife": Action(kind="ife", ife=Ife(parms=IfeParms(index=42, action=1))),
    "ipt": Action(kind="ipt", ipt=Ipt(table="testTable", hook=42, index=1984)),
    "mirred": Action(kind="mirred", mirred=Mirred(parms=MirredParam(index=42, action=1))),
    "mirred+cookie+index": Action(
        kind="mirred",
        cookie=b"\xaa\x55",
        index=42,
        mirred=Mirred(parms=MirredParam(index=42, action=1)),
    ),
    "mirred+stats": Action(
        kind="mirred",
        mirred=Mirred(parms=MirredParam(index=42, action=1)),
        stats=b"\x01\x02\x03\x04",
    ),
    "nat": Action(kind="nat", nat=Nat(parms=NatParms(index=42, action=1))),
    "sample": Action(kind="sample", sample=Sample(parms=SampleParms(index=42, action=1))),
    "vlan": Action(kind="vlan", vlan=VLan(parms=VLanParms(index=42, action=1))),
    "tunnel key": Action(kind="tunnel_key", tunnel_key=TunnelKey(key_enc_key_id=123)),
    "gate": Action(kind="gate", gate=Gate(parms=GateParms(index=42), priority=21)),
    "gact": Action(kind="gact", gact=Gact(prob=GactProb(ptype=1), parms=GactParms(index=2))),
    "mpls": Action(kind="mpls", mpls=MPLS(tc=73)),
    "skbedit": Action(kind="skbedit", skbedit=SkbEdit(priority=42)),
    "skbmod": Action(kind="skbmod", skbmod=SkbMod(etype=73)),
}


@pytest.mark.parametrize("action", ROUND_TRIP_CASES.values(), ids=ROUND_TRIP_CASES.keys())
def test_round_trip(action):
    data = marshal_actions(0, [action])
    assert unmarshal_actions(data) == [action]


def test_round_trip_with_padding():
    action = Action(kind="ct", ct=Ct(zone=7))
    data = marshal_action(0, action, 2) + marshal_attributes(
        [Option(ValueType.BYTES, 5, b"\x00")]
    )
    assert unmarshal_action(data) == action


def test_actions_are_numbered_from_one():
    first = Action(kind="ct", ct=Ct(zone=1))
    second = Action(kind="skbedit", skbedit=SkbEdit(mark=2))
    data = marshal_actions(0, [first, second])
    assert [attr.attr_type for attr in decode_attributes(data)] == [1, 2]
    assert unmarshal_actions(data) == [first, second]


def test_empty_kind():
    with pytest.raises(TcError, match="kind is missing"):
        marshal_actions(0, [Action()])


def test_unknown_kind():
    with pytest.raises(TcError, match="unknown kind 'test'"):
        marshal_actions(0, [Action(kind="test")])


def test_nil():
    with pytest.raises(NoArgError):
        marshal_action(0, None, 2)


def test_option_error_is_raised():
    action = Action(kind="bpf", bpf=ActBpf(tm=Tcft(1, 2, 3, 4)))
    with pytest.raises(NoArgAlterError):
        marshal_action(0, action, 2)


def test_option_error_is_tolerated_on_delete():
    action = Action(kind="bpf", bpf=ActBpf(tm=Tcft(1, 2, 3, 4)))
    result = unmarshal_action(marshal_action(RTM_DELACTION, action, 2))
    assert result == Action(kind="bpf")


def test_unmarshal_unknown_kind():
    data = marshal_attributes(
        [
            Option(ValueType.STRING, 1, "unknown"),
            Option(ValueType.BYTES, 2, b"\x42"),
        ]
    )
    with pytest.raises(TcError):
        unmarshal_action(data)


def test_unmarshal_unknown_attribute():
    data = marshal_attributes([Option(ValueType.UINT32, 42, 1)])
    with pytest.raises(TcError):
        unmarshal_action(data)


def test_extract_act_options_sets_field():
    action = Action(kind="vlan")
    options = marshal_attributes([Option(ValueType.UINT16, 3, 12)])
    value = extract_act_options(options, action, "vlan")
    assert value == VLan(push_id=12)
    assert action.vlan == VLan(push_id=12)


def test_extract_act_options_unsupported():
    with pytest.raises(TcError):
        extract_act_options(b"", Action(), "nothing")