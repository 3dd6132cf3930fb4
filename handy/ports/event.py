from typing import Any, Protocol


class EventPort(Protocol):
    def stop_propagation(self) -> Any:
        """Stop the event from reaching further listeners."""
        ...
