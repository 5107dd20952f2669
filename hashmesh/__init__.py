"""Serialization, hash-IP addresses, peering statistics and RPC for a mesh network node."""

__version__ = "0.1.0"