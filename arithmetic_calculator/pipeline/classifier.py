"""Classify each code point of the input text into a glyph."""
from typing import Dict, List

from arithmetic_calculator.common.errors import UnrecognizedSymbolError
from arithmetic_calculator.common.models import Glyph, GlyphKind


# Mapping of single-symbol code points to their glyph kind
SYMBOLS: Dict[str, GlyphKind] = {
    "+": GlyphKind.PLUS,
    "-": GlyphKind.MINUS,
    "*": GlyphKind.MULTIPLY,
    "/": GlyphKind.DIVIDE,
    ".": GlyphKind.DECIMAL_SEPARATOR,
    "(": GlyphKind.PARENTHESIS_OPEN,
    ")": GlyphKind.PARENTHESIS_CLOSE,
}


class GlyphClassifier:
    """
    Map code points to glyphs, one for one.

    Only ASCII digits are digits: str.isdigit() would also accept superscripts
    and other scripts' digits, which int() and float() do not all understand.
    """

    @staticmethod
    def classify(symbol: str, position: int) -> Glyph:
        """
        Classify a single code point.

        :param str symbol: One code point of the input
        :param int position: 0-based index of the code point in the input

        :return: The classified glyph
        :rtype: Glyph
        :raises UnrecognizedSymbolError: If the code point is outside the supported set
        """
        if "0" <= symbol <= "9":
            kind = GlyphKind.DIGIT
        elif symbol in SYMBOLS:
            kind = SYMBOLS[symbol]
        elif symbol.isspace():
            kind = GlyphKind.WHITESPACE
        else:
            raise UnrecognizedSymbolError(symbol, position)
        return Glyph(kind=kind, symbol=symbol, position=position)

    @staticmethod
    def classify_text(text: str) -> List[Glyph]:
        """
        Classify every code point of a text, in order.

        :param str text: Input text

        :return: One glyph per code point
        :rtype: List[Glyph]
        :raises UnrecognizedSymbolError: On the first unsupported code point
        """
        return [GlyphClassifier.classify(symbol, position) for position, symbol in enumerate(text)]
