import enum
import re
from dataclasses import dataclass

from stackcalc.errors import ErrorKind, EvaluationError
from stackcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    idx: int

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def tokenize(code: str) -> list[Token] | EvaluationError:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_valid_in_number(code[i]):
            seen_dot = code[i] == "."
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                if code[number_end_idx] == ".":
                    if seen_dot:
                        break  # second dot starts the next literal
                    seen_dot = True
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            if lexeme == ".":
                return EvaluationError(
                    ErrorKind.INVALID_EXPRESSION, "Decimal point without digits", expression=code, position=i
                )
            tokens.append(Token(type=TokenType.NUMBER, lexeme=lexeme, idx=i))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], idx=i))
        elif code[i].isspace():
            pass
        else:
            return EvaluationError(
                ErrorKind.INVALID_EXPRESSION, f"Unexpected character: {code[i]!r}", expression=code, position=i
            )
        i += 1
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
