from typing import Iterable

from stackcalc.display import calculate
from stackcalc.evaluator import Precedence

CLEAR_LABEL = "C"
EQUALS_LABEL = "="

BUTTON_LABELS: list[list[str]] = [
    ["7", "8", "9", "/"],
    ["4", "5", "6", "*"],
    ["1", "2", "3", "-"],
    ["0", CLEAR_LABEL, EQUALS_LABEL, "+"],
]


class Keypad:
    """The calculator's text entry driven by button labels instead of clicks.

    Anything that is not ``C`` or ``=`` is appended to the entry as is, the
    text left on screen after ``=`` (including ``Error``) is what the next
    press appends to.
    """

    def __init__(self, precedence: Precedence = Precedence.FLAT) -> None:
        self.precedence = precedence
        self.text = ""

    def press(self, label: str) -> str:
        if label == CLEAR_LABEL:
            self.text = ""
        elif label == EQUALS_LABEL:
            self.text = calculate(self.text, self.precedence)
        else:
            self.text += label
        return self.text

    def press_many(self, labels: Iterable[str]) -> str:
        for label in labels:
            self.press(label)
        return self.text
