"""Turn classified glyphs into tokens, resolving unary minus."""
from typing import Dict, List, Optional, Tuple

from arithmetic_calculator.common.errors import MalformedNumberError, MissingOperandError
from arithmetic_calculator.common.models import (
    INT64_DIGITS,
    Glyph,
    GlyphKind,
    Number,
    Token,
    TokenKind,
    normalize_number,
)


# Glyphs that map one-to-one onto a token
SIMPLE_TOKENS: Dict[GlyphKind, TokenKind] = {
    GlyphKind.PLUS: TokenKind.ADD,
    GlyphKind.MULTIPLY: TokenKind.MULTIPLY,
    GlyphKind.DIVIDE: TokenKind.DIVIDE,
    GlyphKind.PARENTHESIS_CLOSE: TokenKind.PARENTHESIS_CLOSE,
}

NUMBER_GLYPHS: Tuple[GlyphKind, ...] = (GlyphKind.DIGIT, GlyphKind.DECIMAL_SEPARATOR)

# A minus right after one of these is a subtraction, anywhere else it is a negation
OPERAND_END_TOKENS: Tuple[TokenKind, ...] = (TokenKind.NUMBER, TokenKind.PARENTHESIS_CLOSE)


class Tokenizer:
    """
    Single left-to-right pass over the glyphs with one token of lookback.

    Examples:
        - "5 - -3" gives NUMBER(5) SUBTRACT NUMBER(-3)
        - "-(4 - 5)" gives PARENTHESIS_OPEN(negated) NUMBER(4) SUBTRACT NUMBER(5) PARENTHESIS_CLOSE
    """

    @staticmethod
    def _read_number(glyphs: List[Glyph], start: int) -> Tuple[Number, int]:
        """
        Read the literal made of the digit and decimal separator glyphs starting at `start`.

        :param List[Glyph] glyphs: Glyph sequence
        :param int start: Index of the first glyph of the literal

        :return: Tuple of (unsigned value, index of the first glyph after the literal)
        :rtype: Tuple[Number, int]
        :raises MalformedNumberError: If the literal has several separators or no digit
        """
        end = start
        while end < len(glyphs) and glyphs[end].kind in NUMBER_GLYPHS:
            end += 1

        literal = "".join(glyph.symbol for glyph in glyphs[start:end])
        separators = literal.count(".")
        if separators > 1 or literal == ".":
            raise MalformedNumberError(literal, glyphs[start].position)

        if separators == 1:
            # "3." and ".5" are accepted, float() reads both
            return float(literal), end
        if len(literal.lstrip("0")) > INT64_DIGITS:
            # Beyond int64 anyway, and int() refuses very long digit strings
            return float(literal), end
        return int(literal), end

    @staticmethod
    def tokenize(glyphs: List[Glyph]) -> List[Token]:
        """
        Convert glyphs into tokens.

        Whitespace is dropped, digit runs become NUMBER tokens and a unary minus is
        folded into the following number or opening parenthesis.

        :param List[Glyph] glyphs: Classified input

        :return: Token sequence, never longer than the glyph sequence
        :rtype: List[Token]
        :raises MalformedNumberError: On an invalid numeric literal
        :raises MissingOperandError: If a unary minus is not followed by a number or a group
        """
        tokens: List[Token] = []
        # Position of the first unary minus still waiting for its operand
        negation_position: Optional[int] = None
        negated: bool = False

        index = 0
        while index < len(glyphs):
            glyph = glyphs[index]

            if glyph.kind == GlyphKind.WHITESPACE:
                index += 1
                continue

            if glyph.kind in NUMBER_GLYPHS:
                value, index = Tokenizer._read_number(glyphs, index)
                if negated:
                    value = -value
                position = glyph.position if negation_position is None else negation_position
                tokens.append(Token(kind=TokenKind.NUMBER, value=normalize_number(value), position=position))
                negation_position, negated = None, False
                continue

            if glyph.kind == GlyphKind.MINUS:
                previous: Optional[Token] = tokens[-1] if tokens else None
                if negation_position is None and previous is not None and previous.kind in OPERAND_END_TOKENS:
                    tokens.append(Token(kind=TokenKind.SUBTRACT, position=glyph.position))
                else:
                    # Unary: each further minus toggles the sign ("--3" is 3)
                    if negation_position is None:
                        negation_position = glyph.position
                    negated = not negated
                index += 1
                continue

            if glyph.kind == GlyphKind.PARENTHESIS_OPEN:
                position = glyph.position if negation_position is None else negation_position
                tokens.append(Token(kind=TokenKind.PARENTHESIS_OPEN, negated=negated, position=position))
                negation_position, negated = None, False
                index += 1
                continue

            # Remaining glyphs cannot carry a pending negation
            if negation_position is not None:
                raise MissingOperandError(f"'-' is followed by {glyph.symbol!r} instead of an operand", negation_position)
            tokens.append(Token(kind=SIMPLE_TOKENS[glyph.kind], position=glyph.position))
            index += 1

        if negation_position is not None:
            raise MissingOperandError("'-' at the end of the expression has no operand", negation_position)

        return tokens
