"""
Block State Values Package

Closed sets of state values for game world blocks (facing direction,
attachment, connection state, ...), each with a canonical name derived
from its identifier and an exact parser back from that name.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Which blocks use which state axis
    - World or chunk storage
    - Network or save-file framing

Families are declared once, as data, in blockstate.values.
All lookups run against tables built at import and never changed.
"""

__version__ = "0.1.0"
