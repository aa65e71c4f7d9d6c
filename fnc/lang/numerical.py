"""Integer literals. The lexer keeps digits as text; conversion happens when the parser builds an Int expression, and
the value must fit a 32-bit signed integer.
"""

from fnc.lang.error import LiteralError

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def to_int(text):
    """Returns the integer value of literal text. Raises LiteralError if text is not a valid in-range integer."""
    try:
        if not (text.isascii() and text.isdigit()):
            raise ValueError(text)
        value = int(text)
    except (AttributeError, ValueError):
        raise LiteralError(str(text)) from None

    if not INT_MIN <= value <= INT_MAX:
        raise LiteralError(text)
    return value
