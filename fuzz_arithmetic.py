"""Random checks of both precedence modes, runs until interrupted.

FLAT results are compared with a plain left fold over the operators,
CONVENTIONAL results with python's own arithmetic. Arbitrary strings over the
accepted alphabet must come back as a float or an error, never an exception.
"""
import math
import operator
import random
import string

from stackcalc.errors import EvaluationError
from stackcalc.evaluator import Precedence, evaluate

PY_OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul, "/": operator.truediv}


def generate_chain(n_operands: int) -> tuple[str, list[float], list[str]]:
    operands = [float(random.randint(0, 99)) for _ in range(n_operands)]
    ops = random.choices(list(PY_OPERATORS), k=n_operands - 1)
    code = f"{operands[0]:g}" + "".join(f" {op} {operand:g}" for op, operand in zip(ops, operands[1:]))
    return code, operands, ops


def left_fold(operands: list[float], ops: list[str]) -> float | str:
    acc = operands[0]
    for op, operand in zip(ops, operands[1:]):
        if op == "/" and operand == 0:
            return "division by zero"
        acc = PY_OPERATORS[op](acc, operand)
    return acc


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except ZeroDivisionError as e:
        return str(e)


def agree(expected: float | str, actual: float | EvaluationError) -> bool:
    if isinstance(expected, str) or isinstance(actual, EvaluationError):
        return isinstance(expected, str) and isinstance(actual, EvaluationError)
    return math.isclose(expected, actual)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    while True:
        code, operands, ops = generate_chain(random.randint(1, 6))

        flat = evaluate(code, Precedence.FLAT)
        if not agree(left_fold(operands, ops), flat):
            print(f"FLAT {code!r}\nfold: {left_fold(operands, ops)}\nmy: {flat}\n\n")

        conventional = evaluate(code, Precedence.CONVENTIONAL)
        if not agree(eval_py(code), conventional):
            print(f"CONVENTIONAL {code!r}\npy: {eval_py(code)}\nmy: {conventional}\n\n")

        junk = "".join(random.choices(alphabet, k=10))
        for precedence in Precedence:
            try:
                evaluate(junk, precedence)
            except Exception as e:
                print(f"{precedence} {junk!r}\nraised: {e!r}\n\n")
