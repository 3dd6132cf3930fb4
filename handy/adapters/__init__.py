from .system_random import SystemRandomSource

__all__ = ["SystemRandomSource"]
