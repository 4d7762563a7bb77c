"""Routing netlink message types and other kernel constants used by tc."""

from __future__ import annotations

LINKLAYER_UNSPEC = 0
LINKLAYER_ETHERNET = 1
LINKLAYER_ATM = 2

ATM_CELL_PAYLOAD = 48
ATM_CELL_SIZE = 53

AF_UNSPEC = 0x0
NETLINK_ROUTE = 0x0
IFLA_EXT_MASK = 0x1D
RTM_GETLINK = 0x12
RTNLGRP_TC = 0x4

RTM_NEWQDISC = 36
RTM_DELQDISC = 37
RTM_GETQDISC = 38

RTM_NEWTCLASS = 40
RTM_DELTCLASS = 41
RTM_GETTCLASS = 42

RTM_NEWTFILTER = 44
RTM_DELTFILTER = 45
RTM_GETTFILTER = 46

RTM_NEWACTION = 48
RTM_DELACTION = 49
RTM_GETACTION = 50

RTM_NEWCHAIN = 100
RTM_DELCHAIN = 101
RTM_GETCHAIN = 102

FILTER_KINDS = frozenset(
    {
        "basic",
        "bpf",
        "cgroup",
        "flow",
        "flower",
        "fw",
        "matchall",
        "route4",
        "rsvp",
        "u32",
        "tcindex",
    }
)

_CHAIN_ACTIONS = frozenset({RTM_NEWCHAIN, RTM_GETCHAIN, RTM_DELCHAIN})
_DEL_ACTIONS = frozenset({RTM_DELTFILTER, RTM_DELTCLASS})


def is_filter(kind: str) -> bool:
    """Return True if ``kind`` names a supported classifier."""
    return kind in FILTER_KINDS


def is_chain_action(action: int) -> bool:
    """Return True if ``action`` is one of the chain message types."""
    return action in _CHAIN_ACTIONS


def is_del_action(action: int) -> bool:
    """Return True if ``action`` deletes a filter or a class."""
    return action in _DEL_ACTIONS