"""Character-level scanner for the arithmetic expression language.

The language is small enough that the parser drives scanning directly:
there is no token stream, only a cursor over the source string that the
parser advances as it recognizes each production.

Lexical elements:
- Numbers: decimal literals such as 42, 3.14, .5, 5.
- Variables: x/a, y/b, z/c, t/d (argument indices 0 to 3)
- Positional references: {N}
- Operators: + - * /
- Punctuation: ( ) { }
"""

import re

from mathexpr.expressions.errors import ParseError

NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|[0-9]*\.?[0-9]+")
INDEX_PATTERN = re.compile(r"[0-9]+")

# Named variables map to argument indices
VARIABLES = {
    "x": 0,
    "a": 0,
    "y": 1,
    "b": 1,
    "z": 2,
    "c": 2,
    "t": 3,
    "d": 3,
}


class Scanner:
    """Cursor over an expression source string.

    Usage:
        scanner = Scanner(" 1.5 + x")
        scanner.skip_whitespace()
        text = scanner.match_number()  # "1.5"
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0

    def at_end(self) -> bool:
        """Check if the whole source has been consumed."""
        return self.position >= len(self.source)

    def current(self) -> str | None:
        """Get the character under the cursor, or None at end of text."""
        if self.at_end():
            return None
        return self.source[self.position]

    def advance(self, count: int = 1) -> None:
        self.position += count

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.source[self.position].isspace():
            self.position += 1

    def match_number(self) -> str | None:
        """Consume a decimal literal at the cursor and return its text.

        Returns None (consuming nothing) if no literal starts here.
        """
        match = NUMBER_PATTERN.match(self.source, self.position)
        if match is None:
            return None
        self.position = match.end()
        return match.group()

    def read_index(self) -> int:
        """Consume a braced positional reference and return its index.

        The cursor must be on the opening '{'. Whitespace around the
        digits is allowed; the digits themselves must be contiguous.
        """
        start = self.position
        end = self.source.find("}", start + 1)
        if end < 0:
            raise self.error("Unmatched '{'", start)

        self.position = start + 1
        self.skip_whitespace()
        if self.position == end:
            raise self.error("Missing parameter index after '{'")

        match = INDEX_PATTERN.match(self.source, self.position)
        text = self.source[self.position:end].strip()
        if match is None or match.end() - self.position != len(text):
            raise self.error(f"'{text}' is not a valid parameter index")

        self.position = end + 1
        return int(text)

    def expect(self, char: str) -> None:
        """Consume the expected character, or raise ParseError."""
        if self.current() != char:
            raise self.error(f"Expected '{char}'")
        self.position += 1

    def require_end(self) -> None:
        """Raise ParseError unless the whole source has been consumed."""
        if not self.at_end():
            raise self.error(f"Unexpected character '{self.current()}'")

    def error(self, message: str, position: int | None = None) -> ParseError:
        """Build a ParseError at the cursor (or the given position)."""
        if position is None:
            position = self.position
        return ParseError(message, position, self.source)
