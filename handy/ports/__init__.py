"""
Ports - protocols the helpers depend on.
"""

from .event import EventPort
from .random_source import RandomSourcePort

__all__ = ["EventPort", "RandomSourcePort"]
