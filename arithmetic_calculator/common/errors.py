"""Typed errors raised by the calculation pipeline."""
from typing import Optional


class CalculatorError(ValueError):
    """
    Base class of every error the calculation pipeline can raise.

    Subclasses ValueError so callers treating malformed expressions as bad values keep working.

    :param str message: Human-readable description of the problem
    :param Optional[int] position: 0-based index in the input text, when known
    """

    kind: str = "CalculatorError"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} (at position {self.position})"


class UnrecognizedSymbolError(CalculatorError):
    """A code point outside the supported symbol set."""

    kind = "UnrecognizedSymbol"

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        super().__init__(f"unrecognized symbol {symbol!r}", position)


class MalformedNumberError(CalculatorError):
    """A numeric literal with several decimal separators or without digits."""

    kind = "MalformedNumber"

    def __init__(self, literal: str, position: int) -> None:
        self.literal = literal
        super().__init__(f"malformed number {literal!r}", position)


class UnmatchedParenthesisError(CalculatorError):
    """A `(` without its `)` or a `)` without its `(`."""

    kind = "UnmatchedParenthesis"

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        super().__init__(f"unmatched parenthesis {symbol!r}", position)


class MissingOperandError(CalculatorError):
    """An operator at a boundary of the expression or next to another operator."""

    kind = "MissingOperand"


class MissingOperatorError(CalculatorError):
    """Two operands next to each other with no operator between them."""

    kind = "MissingOperator"


class EmptyExpressionError(CalculatorError):
    """Nothing to evaluate, either the whole input or a `()` group."""

    kind = "EmptyExpression"


class DivisionByZeroError(CalculatorError):
    kind = "DivisionByZero"

    def __init__(self) -> None:
        super().__init__("division by zero")


class MalformedTreeError(CalculatorError):
    """An empty placeholder node reached evaluation."""

    kind = "MalformedTree"


class NestingTooDeepError(CalculatorError):
    """Parentheses nested beyond the supported depth."""

    kind = "NestingTooDeep"

    def __init__(self, limit: int, position: int) -> None:
        self.limit = limit
        super().__init__(f"parentheses nested deeper than {limit} levels", position)
