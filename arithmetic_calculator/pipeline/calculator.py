"""Evaluate arithmetic expressions through the five-stage pipeline."""
from typing import List

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import Expression, Glyph, Number, Operation, Token
from arithmetic_calculator.pipeline.classifier import GlyphClassifier
from arithmetic_calculator.pipeline.evaluator import Evaluator
from arithmetic_calculator.pipeline.expression_builder import ExpressionBuilder
from arithmetic_calculator.pipeline.operation_builder import OperationBuilder
from arithmetic_calculator.pipeline.tokenizer import Tokenizer


def calculate(text: str) -> Number:
    """
    Evaluate an arithmetic expression.

    Stages:
        1. Classify each code point into a glyph.
        2. Tokenize the glyphs, folding unary minus into the following operand.
        3. Nest the tokens along parentheses into operations.
        4. Build the precedence-aware expression tree.
        5. Evaluate the tree.

    The first stage to fail raises and the following stages never run.

    :param str text: Arithmetic expression, e.g. "1 + 2 * 3 + -(4 - 5)"

    :return: Result, an int when the whole computation stays integral, else a float
    :rtype: Number
    :raises CalculatorError: Subclass describing the first problem found
    """
    glyphs: List[Glyph] = GlyphClassifier.classify_text(text)
    tokens: List[Token] = Tokenizer.tokenize(glyphs)
    logger.debug("🔤 %d tokens from %d glyphs", len(tokens), len(glyphs))

    operations: List[Operation] = OperationBuilder.build(tokens)
    expression: Expression = ExpressionBuilder.build(operations)
    logger.debug("🌳 Expression tree built from %d top-level operations", len(operations))

    result: Number = Evaluator.evaluate(expression)
    logger.debug("🧮 %r = %r", text, result)
    return result


def render(number: Number) -> str:
    """
    Render a number as an integer literal for ints and a decimal literal for floats.

    :param Number number: Computed value

    :return: Text form, e.g. "42" or "42.0"
    :rtype: str
    """
    if isinstance(number, float):
        return repr(number)
    return str(number)
