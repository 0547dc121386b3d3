"""Immutable data types passed between the stages of the calculation pipeline."""
from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


# Integer variant (int) or real variant (float); bools are rejected by the strict types
Number = Union[StrictInt, StrictFloat]

# Range of the integer variant, larger magnitudes are promoted to real
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
INT64_DIGITS: int = len(str(INT64_MAX))


def normalize_number(value: Union[int, float]) -> Union[int, float]:
    """
    Keep an integer within signed 64-bit range, promoting it to a real otherwise.

    :param Union[int, float] value: Raw numeric value

    :return: The same value, as a float if it is an int outside the 64-bit range
    :rtype: Union[int, float]
    """
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        return float(value)
    return value


class FrozenModel(BaseModel):
    """Base for pipeline values: each stage builds new instances instead of mutating old ones."""

    model_config = ConfigDict(frozen=True)


class GlyphKind(str, Enum):
    """Lexical category of a single input code point."""

    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    DECIMAL_SEPARATOR = "decimal_separator"
    DIGIT = "digit"
    PARENTHESIS_OPEN = "parenthesis_open"
    PARENTHESIS_CLOSE = "parenthesis_close"
    WHITESPACE = "whitespace"


class Glyph(FrozenModel):
    """A classified code point of the input text."""

    kind: GlyphKind = Field(..., description="Lexical category of the code point")
    symbol: str = Field(..., min_length=1, max_length=1, description="The code point itself")
    position: int = Field(..., ge=0, description="0-based index in the input text")


class TokenKind(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    NUMBER = "number"
    PARENTHESIS_OPEN = "parenthesis_open"
    PARENTHESIS_CLOSE = "parenthesis_close"


class Token(FrozenModel):
    """
    A lexical unit of the expression.

    Unary minus never shows up as a token of its own: it is folded into the number
    that follows (sign flipped) or into the following opening parenthesis (negated=True).
    """

    kind: TokenKind = Field(..., description="Token category")
    value: Optional[Number] = Field(default=None, description="Literal value of a NUMBER token")
    negated: bool = Field(default=False, description="Whether an opening parenthesis follows a unary minus")
    position: int = Field(..., ge=0, description="Index of the first code point of the token")


class Operator(str, Enum):
    """Binary arithmetic operator, valued by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def precedence(self) -> int:
        """Binding strength: multiply and divide bind tighter than add and subtract."""
        if self in (Operator.MULTIPLY, Operator.DIVIDE):
            return 2
        return 1


class BinaryOperator(FrozenModel):
    type: Literal["operator"] = "operator"
    operator: Operator
    position: int = Field(..., ge=0)


class NumberOperand(FrozenModel):
    type: Literal["number"] = "number"
    value: Number
    position: int = Field(..., ge=0)


class GroupOperand(FrozenModel):
    """A parenthesized group, owning the operations found between its parentheses."""

    type: Literal["group"] = "group"
    operations: Tuple["Operation", ...] = Field(default=(), description="Operations inside the parentheses")
    negated: bool = Field(default=False, description="Whether the group is preceded by a unary minus")
    position: int = Field(..., ge=0, description="Index of the opening parenthesis")


Operation = Annotated[
    Union[BinaryOperator, NumberOperand, GroupOperand],
    Field(discriminator="type"),
]


class EmptyExpression(FrozenModel):
    """Placeholder used while folding a sequence into a tree; never evaluated."""

    type: Literal["empty"] = "empty"


class NumberExpression(FrozenModel):
    type: Literal["number"] = "number"
    value: Number


class BinaryExpression(FrozenModel):
    """Branch node applying an operator to its two sub-expressions."""

    type: Literal["binary"] = "binary"
    operator: Operator
    left: "Expression"
    right: "Expression"


Expression = Annotated[
    Union[EmptyExpression, NumberExpression, BinaryExpression],
    Field(discriminator="type"),
]

# Resolve the self-referencing fields now that both unions exist
GroupOperand.model_rebuild()
BinaryExpression.model_rebuild()
