"""Nest the flat token stream along its parentheses."""
from typing import Dict, List, Optional, Tuple

from arithmetic_calculator.common.errors import NestingTooDeepError, UnmatchedParenthesisError
from arithmetic_calculator.common.models import (
    BinaryOperator,
    GroupOperand,
    NumberOperand,
    Operation,
    Operator,
    Token,
    TokenKind,
)


OPERATOR_TOKENS: Dict[TokenKind, Operator] = {
    TokenKind.ADD: Operator.ADD,
    TokenKind.SUBTRACT: Operator.SUBTRACT,
    TokenKind.MULTIPLY: Operator.MULTIPLY,
    TokenKind.DIVIDE: Operator.DIVIDE,
}

# Deepest parenthesis nesting accepted; the expression builder recurses once per level
MAX_NESTING_DEPTH: int = 100


class OperationBuilder:
    """
    Descent over the tokens with an explicit stack of open groups.

    Only parentheses introduce nesting here. Operator/operand alternation is not
    checked: that is left to the expression builder.
    """

    @staticmethod
    def build(tokens: List[Token]) -> List[Operation]:
        """
        Convert the token sequence into operations, parenthesized groups becoming nested groups.

        :param List[Token] tokens: Token sequence

        :return: Top-level operations
        :rtype: List[Operation]
        :raises UnmatchedParenthesisError: If the parentheses are unbalanced
        :raises NestingTooDeepError: If groups are nested deeper than MAX_NESTING_DEPTH
        """
        # One frame per open group: its opening parenthesis (None at top level) and its operations
        stack: List[Tuple[Optional[Token], List[Operation]]] = [(None, [])]

        for token in tokens:
            opening, operations = stack[-1]

            if token.kind == TokenKind.PARENTHESIS_OPEN:
                if len(stack) > MAX_NESTING_DEPTH:
                    raise NestingTooDeepError(MAX_NESTING_DEPTH, token.position)
                stack.append((token, []))
            elif token.kind == TokenKind.PARENTHESIS_CLOSE:
                if opening is None:
                    raise UnmatchedParenthesisError(")", token.position)
                stack.pop()
                stack[-1][1].append(
                    GroupOperand(operations=tuple(operations), negated=opening.negated, position=opening.position)
                )
            elif token.kind == TokenKind.NUMBER:
                operations.append(NumberOperand(value=token.value, position=token.position))
            else:
                operations.append(BinaryOperator(operator=OPERATOR_TOKENS[token.kind], position=token.position))

        opening, operations = stack[-1]
        if opening is not None:
            raise UnmatchedParenthesisError("(", opening.position)
        return operations
