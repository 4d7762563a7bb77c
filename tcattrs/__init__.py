"""Encode and decode Linux traffic-control netlink attributes for qdiscs and actions."""

__version__ = "0.1.0"