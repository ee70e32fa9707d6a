from dataclasses import dataclass

from stacker.constants import TUTORIAL_TEXT


@dataclass(slots=True)
class TutorialState:
    visible: bool = False
    text: str = TUTORIAL_TEXT
