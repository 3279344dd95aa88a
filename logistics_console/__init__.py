"""
Logistics console.

Async client for the logistics backend: session and role-based access
control, one service per entity, and the management screens that keep
the in-memory lists an admin or operator works on.
"""

__version__ = "0.1.0"
