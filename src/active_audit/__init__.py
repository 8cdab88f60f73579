"""Attribute-level audit trails for ORM lifecycle events."""

__version__ = "0.1.0"
