"""Two-stack evaluation of flat infix arithmetic.

Numbers go onto an operand stack, ``+ - * /`` and ``(`` onto an operator stack.
Pending operators are reduced when a new operator or a closing bracket arrives
and once more at the end of input. Every input-dependent failure is returned as
an ``EvaluationError`` value instead of being raised.
"""
import enum
import logging
from typing import Callable

from stackcalc.errors import ErrorKind, EvaluationError
from stackcalc.tokenizer import Token, TokenType, tokenize, untokenize
from stackcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


class Precedence(PrintableEnum):
    # every pending operator is reduced before pushing a new one: 2+3*4 == 20
    FLAT = enum.auto()
    # * and / bind tighter than + and -: 2+3*4 == 14
    CONVENTIONAL = enum.auto()


BINARY_OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH)


def get_op_precedence(op: TokenType) -> int:
    return [
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.STAR,
        TokenType.SLASH,
    ].index(op) // 2


def _should_reduce(pending: TokenType, incoming: TokenType, precedence: Precedence) -> bool:
    if precedence is Precedence.FLAT:
        return True
    return get_op_precedence(pending) >= get_op_precedence(incoming)


OperationImpl = Callable[[float, float], float]

operation_impls: dict[TokenType, OperationImpl] = {
    TokenType.PLUS: lambda a, b: a + b,
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: lambda a, b: a / b,
}


def evaluate(expression: str, precedence: Precedence = Precedence.FLAT) -> float | EvaluationError:
    tokens = tokenize(expression)
    if isinstance(tokens, EvaluationError):
        result: float | EvaluationError = tokens
    else:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Evaluating %s (%s precedence)", untokenize(tokens), precedence)
        result = evaluate_tokens(tokens, expression, precedence)
    if isinstance(result, EvaluationError):
        logger.debug("Evaluation of %r failed: %s (%s)", expression, result.kind, result.errmsg)
    return result


def evaluate_tokens(tokens: list[Token], expression: str, precedence: Precedence) -> float | EvaluationError:
    values: list[float] = []
    operators: list[Token] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            values.append(float(token.lexeme))
        elif token.type is TokenType.BRACKET_OPEN:
            operators.append(token)
        elif token.type is TokenType.BRACKET_CLOSE:
            while operators and operators[-1].type is not TokenType.BRACKET_OPEN:
                err = _apply(operators.pop(), values, expression)
                if err is not None:
                    return err
            if operators:
                operators.pop()
            # an unmatched ")" just closes whatever was pending
        elif token.type in BINARY_OPERATORS:
            while (
                operators
                and operators[-1].type is not TokenType.BRACKET_OPEN
                and _should_reduce(operators[-1].type, token.type, precedence)
            ):
                err = _apply(operators.pop(), values, expression)
                if err is not None:
                    return err
            operators.append(token)
        else:
            raise RuntimeError(f"Unexpected token: {token}")

    while operators:
        # an unclosed "(" goes through _apply too and fails there
        err = _apply(operators.pop(), values, expression)
        if err is not None:
            return err

    if len(values) != 1:
        return EvaluationError(
            ErrorKind.INVALID_EXPRESSION,
            f"Expected a single result, {len(values)} operands left",
            expression=expression,
        )
    return values[0]


def _apply(op: Token, values: list[float], expression: str) -> EvaluationError | None:
    """Reduces the two topmost operands with ``op`` in place"""
    if len(values) < 2:
        return EvaluationError(
            ErrorKind.INVALID_EXPRESSION,
            f"Operator {op.lexeme!r} needs two operands",
            expression=expression,
            position=op.idx,
        )
    impl = operation_impls.get(op.type)
    if impl is None:
        return EvaluationError(
            ErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {op.lexeme!r}", expression=expression, position=op.idx
        )
    val2 = values.pop()
    val1 = values.pop()
    if op.type is TokenType.SLASH and val2 == 0:
        return EvaluationError(ErrorKind.DIVISION_BY_ZERO, "Division by zero", expression=expression, position=op.idx)
    values.append(impl(val1, val2))
    return None
