import enum
from dataclasses import dataclass
from typing import Optional

from stackcalc.utils import PrintableEnum, caret_excerpt


class ErrorKind(PrintableEnum):
    DIVISION_BY_ZERO = enum.auto()
    INVALID_EXPRESSION = enum.auto()
    UNKNOWN_OPERATOR = enum.auto()
    # raised at the display boundary only, evaluation itself returns nan/inf as floats
    NON_FINITE_RESULT = enum.auto()


@dataclass
class EvaluationError(Exception):
    """Failed evaluation, returned as a value (and raisable if the caller prefers)"""

    kind: ErrorKind
    errmsg: str
    expression: str
    position: Optional[int] = None

    def __str__(self) -> str:
        header = f"[{self.kind}] {self.errmsg}"
        if self.position is None:
            return header
        return "\n".join([header, *caret_excerpt(self.expression, self.position)])
