from dataclasses import dataclass


@dataclass(slots=True)
class Notification:
    """End-of-game banner text."""
    text: str = ""
    visible: bool = False
