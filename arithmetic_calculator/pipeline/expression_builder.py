"""Build a precedence-aware expression tree from nested operations."""
from typing import List, Optional, Tuple

from arithmetic_calculator.common.errors import EmptyExpressionError, MissingOperandError, MissingOperatorError
from arithmetic_calculator.common.models import (
    BinaryExpression,
    BinaryOperator,
    EmptyExpression,
    Expression,
    GroupOperand,
    NumberExpression,
    NumberOperand,
    Operation,
    Operator,
)


# Precedence levels, combined from the tightest binding to the loosest
PRECEDENCE_LEVELS: Tuple[int, ...] = (2, 1)


class ExpressionBuilder:
    """
    Build the expression tree of one nesting level, recursing into groups.

    Algorithm:
        1. Candidate generation: materialize every operand into an expression leaf
           (groups are built recursively), checking that operands and operators alternate.
        2. Precedence combination: collapse multiply/divide pairs left to right,
           then add/subtract pairs left to right.

    Combining equal-precedence operators from the left keeps them left-associative,
    so "10 - 2 - 3" is (10 - 2) - 3.

    Examples:
        - [1, +, 2, *, 3] gives 1 + (2 * 3)
        - [1, -, 2, +, 3] gives (1 - 2) + 3
    """

    @staticmethod
    def _materialize(operand: Operation) -> Expression:
        """
        Convert an operand into its expression leaf.

        :param Operation operand: Number or group operand

        :return: Expression of the operand
        :rtype: Expression
        """
        if isinstance(operand, NumberOperand):
            return NumberExpression(value=operand.value)

        inner = ExpressionBuilder.build(list(operand.operations), position=operand.position)
        if operand.negated:
            return BinaryExpression(operator=Operator.MULTIPLY, left=NumberExpression(value=-1), right=inner)
        return inner

    @staticmethod
    def _split(
        operations: List[Operation], position: Optional[int]
    ) -> Tuple[List[Expression], List[Operator]]:
        """
        Separate operands from operators, enforcing operand/operator alternation.

        :param List[Operation] operations: Operations of one nesting level
        :param Optional[int] position: Position of the enclosing parenthesis, None at top level

        :return: Tuple of (n operand expressions, n - 1 operators between them)
        :rtype: Tuple[List[Expression], List[Operator]]
        :raises EmptyExpressionError: If there is no operation at all
        :raises MissingOperandError: If an operator lacks an operand on either side
        :raises MissingOperatorError: If two operands follow each other
        """
        if not operations:
            raise EmptyExpressionError("nothing to evaluate", position)

        terms: List[Expression] = []
        operators: List[Operator] = []
        expect_operand = True

        for operation in operations:
            if isinstance(operation, BinaryOperator):
                if expect_operand:
                    raise MissingOperandError(
                        f"operator '{operation.operator.value}' has no left operand", operation.position
                    )
                operators.append(operation.operator)
                expect_operand = True
            else:
                if not expect_operand:
                    raise MissingOperatorError("two operands without an operator between them", operation.position)
                terms.append(ExpressionBuilder._materialize(operation))
                expect_operand = False

        if expect_operand:
            last = operations[-1]
            raise MissingOperandError(f"operator '{last.operator.value}' has no right operand", last.position)

        return terms, operators

    @staticmethod
    def _combine(
        terms: List[Expression], operators: List[Operator], precedence: int
    ) -> Tuple[List[Expression], List[Operator]]:
        """
        Collapse, left to right, every pair joined by an operator of the given precedence.

        :param List[Expression] terms: Operand expressions
        :param List[Operator] operators: Operators between consecutive terms
        :param int precedence: Precedence level to collapse

        :return: Tuple of (remaining terms, remaining operators)
        :rtype: Tuple[List[Expression], List[Operator]]
        """
        combined: List[Expression] = []
        remaining: List[Operator] = []

        # Fold starts from the empty placeholder, replaced by the first term
        current: Expression = EmptyExpression()
        for index, term in enumerate(terms):
            if isinstance(current, EmptyExpression):
                current = term
                continue
            operator = operators[index - 1]
            if operator.precedence == precedence:
                current = BinaryExpression(operator=operator, left=current, right=term)
            else:
                combined.append(current)
                remaining.append(operator)
                current = term
        combined.append(current)

        return combined, remaining

    @staticmethod
    def build(operations: List[Operation], position: Optional[int] = None) -> Expression:
        """
        Build the expression tree of a sequence of operations.

        :param List[Operation] operations: Operations of one nesting level
        :param Optional[int] position: Position of the enclosing parenthesis, None at top level

        :return: Expression tree, free of empty placeholders
        :rtype: Expression
        :raises EmptyExpressionError: On an empty sequence, e.g. "()"
        :raises MissingOperandError: On an operator at a boundary or next to another operator
        :raises MissingOperatorError: On two adjacent operands
        """
        terms, operators = ExpressionBuilder._split(operations, position)

        for precedence in PRECEDENCE_LEVELS:
            terms, operators = ExpressionBuilder._combine(terms, operators, precedence)

        # Every operator has been combined, a single tree remains
        return terms[0]
