"""Reduce an expression tree to a single number."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, List, Tuple

from arithmetic_calculator.common.errors import DivisionByZeroError, MalformedTreeError
from arithmetic_calculator.common.models import (
    BinaryExpression,
    Expression,
    Number,
    NumberExpression,
    Operator,
    normalize_number,
)


# Type alias for operator functions (taking two numbers, returning a number)
OperatorFn: ABCCallable[[Number, Number], Number] = Callable[[Number, Number], Number]

# Mapping of operators to their function; truediv always returns a float, even for two ints
OPERATORS: dict[Operator, OperatorFn] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


class Evaluator:
    """
    Post-order evaluation of an expression tree.

    The walk uses an explicit stack, so long operator chains (one tree level per
    term) are not bounded by the interpreter's recursion limit.

    Numeric promotion:
        - int with int stays int for +, - and *
        - any float operand gives a float
        - / always gives a float ("6 / 3" is 2.0)
        - an int result outside signed 64-bit range becomes a float
    """

    @staticmethod
    def _apply(node: BinaryExpression, left: Number, right: Number) -> Number:
        # Matches 0, 0.0 and -0.0
        if node.operator == Operator.DIVIDE and right == 0:
            raise DivisionByZeroError()
        return normalize_number(OPERATORS[node.operator](left, right))

    @staticmethod
    def evaluate(expression: Expression) -> Number:
        """
        Evaluate an expression tree, left subtrees before right ones.

        :param Expression expression: Tree produced by the expression builder

        :return: Value of the tree
        :rtype: Number
        :raises DivisionByZeroError: If a divisor evaluates to zero
        :raises MalformedTreeError: If an empty placeholder is found in the tree
        """
        # (node, children already evaluated)
        pending: List[Tuple[Expression, bool]] = [(expression, False)]
        values: List[Number] = []

        while pending:
            node, reduced = pending.pop()

            if isinstance(node, NumberExpression):
                values.append(node.value)
            elif isinstance(node, BinaryExpression):
                if reduced:
                    right = values.pop()
                    left = values.pop()
                    values.append(Evaluator._apply(node, left, right))
                else:
                    # Popped in reverse: left, then right, then the node itself
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                raise MalformedTreeError(f"cannot evaluate {type(node).__name__}")

        return values.pop()
