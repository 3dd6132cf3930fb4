"""
Toolkit component port definitions.
"""

from handy.ports.random_source import RandomSourcePort

__all__ = ["RandomSourcePort"]
