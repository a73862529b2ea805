"""Parser for the arithmetic expression language.

Builds an expression tree directly from the source string using recursive
descent. Parsing is single pass and never backtracks.

Grammar (lowest precedence first):
    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '+' factor | '-' factor | variable | '{' index '}'
                | number | '(' expression ')'

Binary operators are left associative. Unary signs bind tighter than
'*' and '/'.
"""

from decimal import Decimal, InvalidOperation

from mathexpr.expressions.lexer import VARIABLES, Scanner
from mathexpr.expressions.nodes import (
    BinaryOp,
    Constant,
    Negate,
    Node,
    Operator,
    Variable,
)

ADDITIVE = {"+": Operator.ADD, "-": Operator.SUB}
MULTIPLICATIVE = {"*": Operator.MUL, "/": Operator.DIV}

# Parentheses and unary signs recurse; keep well inside the interpreter's stack
MAX_NESTING = 100


class Parser:
    """Recursive descent parser for arithmetic expressions.

    Usage:
        parser = Parser("(x + 1) * {2}")
        tree = parser.parse()
    """

    def __init__(self, source: str):
        self.source = source
        self.scanner = Scanner(source)
        self.depth = 0

    def parse(self) -> Node:
        """Parse the whole source and return the tree root.

        Raises:
            ParseError: If the source is not a valid expression
        """
        tree = self._parse_expression()
        self.scanner.skip_whitespace()
        self.scanner.require_end()
        return tree

    # -------------------------------------------------------------------------
    # Productions (lowest precedence first)
    # -------------------------------------------------------------------------

    def _parse_expression(self) -> Node:
        """Parse additive expression (+, -)."""
        return self._parse_binary(ADDITIVE, self._parse_term)

    def _parse_term(self) -> Node:
        """Parse multiplicative expression (*, /)."""
        return self._parse_binary(MULTIPLICATIVE, self._parse_factor)

    def _parse_binary(self, operators, parse_operand) -> Node:
        left = parse_operand()

        while True:
            self.scanner.skip_whitespace()
            operator = operators.get(self.scanner.current())
            if operator is None:
                return left
            self.scanner.advance()
            right = parse_operand()
            left = BinaryOp(operator, left, right)

    def _parse_factor(self) -> Node:
        """Parse a signed factor, variable, number or grouped expression."""
        scanner = self.scanner
        scanner.skip_whitespace()

        char = scanner.current()
        if char is None:
            raise scanner.error("Unexpected end of text")

        if char in VARIABLES:
            scanner.advance()
            return Variable(VARIABLES[char])

        if char == "{":
            return Variable(scanner.read_index())

        if char not in "+-(":
            return self._parse_number()

        self.depth += 1
        if self.depth > MAX_NESTING:
            raise scanner.error("Expression is nested too deeply")
        scanner.advance()

        if char == "+":
            node = self._parse_factor()
        elif char == "-":
            node = Negate(self._parse_factor())
        else:
            node = self._parse_expression()
            scanner.skip_whitespace()
            scanner.expect(")")

        self.depth -= 1
        return node

    def _parse_number(self) -> Constant:
        start = self.scanner.position
        text = self.scanner.match_number()
        if text is None:
            raise self.scanner.error(f"Unexpected character '{self.scanner.current()}'")

        try:
            return Constant(Decimal(text))
        except InvalidOperation:
            raise self.scanner.error(f"'{text}' is not a valid number", start)


def parse(source: str) -> Node:
    """Convenience function to parse an expression string.

    Args:
        source: The expression string

    Returns:
        The tree root node
    """
    return Parser(source).parse()
