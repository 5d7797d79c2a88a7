import logging
import math

from stackcalc.errors import ErrorKind, EvaluationError
from stackcalc.evaluator import Precedence, evaluate

logger = logging.getLogger(__name__)

ERROR_MARKER = "Error"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def format_result(value: float) -> str | EvaluationError:
    """Integer form for whole numbers that fit a 32-bit int, six decimals otherwise"""
    if not math.isfinite(value):
        logger.debug("Non-finite result: %s", value)
        return EvaluationError(ErrorKind.NON_FINITE_RESULT, f"Result is not a finite number: {value}", expression="")
    if INT_MIN <= value <= INT_MAX and value == math.trunc(value):
        return str(math.trunc(value))
    return f"{value:.6f}"


def calculate(expression: str, precedence: Precedence = Precedence.FLAT) -> str:
    result = evaluate(expression, precedence)
    if isinstance(result, EvaluationError):
        return ERROR_MARKER
    formatted = format_result(result)
    if isinstance(formatted, EvaluationError):
        return ERROR_MARKER
    return formatted
