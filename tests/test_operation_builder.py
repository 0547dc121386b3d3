"""Test class OperationBuilder."""
import pytest

from arithmetic_calculator.common.errors import NestingTooDeepError, UnmatchedParenthesisError
from arithmetic_calculator.common.models import BinaryOperator, GroupOperand, NumberOperand, Operator
from arithmetic_calculator.pipeline.classifier import GlyphClassifier
from arithmetic_calculator.pipeline.operation_builder import MAX_NESTING_DEPTH, OperationBuilder
from arithmetic_calculator.pipeline.tokenizer import Tokenizer


def build(text: str):
    return OperationBuilder.build(Tokenizer.tokenize(GlyphClassifier.classify_text(text)))


def test_build_flat_sequence():
    """Numbers become operands and operator tokens become binary operators."""
    assert build("1 + 2 * 3") == [
        NumberOperand(value=1, position=0),
        BinaryOperator(operator=Operator.ADD, position=2),
        NumberOperand(value=2, position=4),
        BinaryOperator(operator=Operator.MULTIPLY, position=6),
        NumberOperand(value=3, position=8),
    ]


def test_build_nested_groups():
    """Each parenthesized group becomes a nested group operand."""
    operations = build("2 * (3 - (4))")
    assert len(operations) == 3
    group = operations[2]
    assert isinstance(group, GroupOperand)
    assert group.position == 4
    assert not group.negated
    assert group.operations == (
        NumberOperand(value=3, position=5),
        BinaryOperator(operator=Operator.SUBTRACT, position=7),
        GroupOperand(operations=(NumberOperand(value=4, position=10),), position=9),
    )


def test_build_negated_group():
    """The negation of an opening parenthesis is carried over to its group."""
    (group,) = build("-(4 - 5)")
    assert isinstance(group, GroupOperand)
    assert group.negated
    assert group.position == 0


def test_build_empty_group_is_kept():
    """An empty group is not rejected here, that is left to the expression builder."""
    assert build("()") == [GroupOperand(operations=(), position=0)]


def test_build_does_not_check_alternation():
    """Adjacent operators pass through untouched."""
    assert [type(operation) for operation in build("3 + * 4")] == [
        NumberOperand,
        BinaryOperator,
        BinaryOperator,
        NumberOperand,
    ]


@pytest.mark.parametrize("text,symbol,position", [
    ("(3 + 4", "(", 0),
    ("((3 + 4)", "(", 0),
    ("(1) + (2", "(", 6),
    ("3 + 4)", ")", 5),
    ("(1))", ")", 3),
    (")(", ")", 0),
])
def test_build_unmatched_parenthesis(text, symbol, position):
    """Unbalanced parentheses raise UnmatchedParenthesisError pointing at the culprit."""
    with pytest.raises(UnmatchedParenthesisError) as exc_info:
        build(text)
    assert exc_info.value.symbol == symbol
    assert exc_info.value.position == position


def test_build_empty():
    assert OperationBuilder.build([]) == []


def test_build_accepts_nesting_up_to_limit():
    """Groups nested exactly MAX_NESTING_DEPTH deep are still built."""
    operations = build("(" * MAX_NESTING_DEPTH + "1" + ")" * MAX_NESTING_DEPTH)
    depth = 0
    while operations and isinstance(operations[0], GroupOperand):
        operations = operations[0].operations
        depth += 1
    assert depth == MAX_NESTING_DEPTH
    assert operations == (NumberOperand(value=1, position=MAX_NESTING_DEPTH),)


@pytest.mark.parametrize("depth", [MAX_NESTING_DEPTH + 1, 1500])
def test_build_rejects_deeper_nesting(depth):
    """Nesting past the limit raises NestingTooDeepError at the first parenthesis too many."""
    with pytest.raises(NestingTooDeepError) as exc_info:
        build("(" * depth + "1" + ")" * depth)
    assert exc_info.value.position == MAX_NESTING_DEPTH
