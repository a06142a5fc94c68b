"""Generic interpreter for gettext plural formulas.

Compiles a C-style plural expression such as
``n%10==1 && n%100!=11 ? 0 : n!=0 ? 1 : 2`` once into a tree of
immutable nodes, then evaluates the tree for each count.

Grammar (lowest precedence first, matching C):
    conditional := or ( "?" conditional ":" conditional )?
    or          := and ( "||" and )*
    and         := equality ( "&&" equality )*
    equality    := relational ( ( "==" | "!=" ) relational )*
    relational  := modulo ( ( "<" | "<=" | ">" | ">=" ) modulo )*
    modulo      := unary ( "%" unary )*
    unary       := "!" unary | primary
    primary     := INTEGER | "n" | "(" conditional ")"

Semantics follow C: comparisons and logical operators yield 0 or 1,
``&&`` and ``||`` short-circuit, ``%`` truncates toward zero, and any
value is truthy when non-zero. Single ``&`` and ``|`` are rejected.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

from pocatalog.constants import MAX_FORMULA_DEPTH, MAX_FORMULA_LENGTH
from pocatalog.diagnostics import ErrorTemplate, PluralFormulaError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Compiled evaluator
    "PluralFormula",
    "compile_plural_formula",
    # Tokens
    "Token",
    "tokenize",
    # Expression tree
    "Literal",
    "Variable",
    "Not",
    "BinaryOperation",
    "Conditional",
    "FormulaNode",
]

# ============================================================================
# TOKENS
# ============================================================================

_INTEGER = "integer"
_VARIABLE = "n"
_OPERATOR = "operator"
_END = "end"

# Longest operators first so "<=" is not read as "<" followed by "=".
_OPERATORS: tuple[str, ...] = (
    "&&", "||", "==", "!=", "<=", ">=",
    "<", ">", "!", "%", "?", ":", "(", ")",
)

_WHITESPACE = " \t\r\n"


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical token of a plural formula.

    Attributes:
        kind: "integer", "n", "operator" or "end"
        text: Source text of the token ("" for end)
        position: Offset of the token in the formula
    """

    kind: str
    text: str
    position: int


def tokenize(source: str) -> list[Token]:
    """Split a formula into tokens, terminated by an end token.

    Args:
        source: Formula text

    Returns:
        Token list whose last element has kind "end"

    Raises:
        PluralFormulaError: On any character outside the grammar
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        char = source[pos]

        if char in _WHITESPACE:
            pos += 1
            continue

        if "0" <= char <= "9":
            start = pos
            while pos < length and "0" <= source[pos] <= "9":
                pos += 1
            tokens.append(Token(_INTEGER, source[start:pos], start))
            continue

        if char == "n":
            tokens.append(Token(_VARIABLE, char, pos))
            pos += 1
            continue

        for operator in _OPERATORS:
            if source.startswith(operator, pos):
                tokens.append(Token(_OPERATOR, operator, pos))
                pos += len(operator)
                break
        else:
            raise PluralFormulaError(ErrorTemplate.formula_unexpected_character(char, pos))

    tokens.append(Token(_END, "", length))
    return tokens


# ============================================================================
# EXPRESSION TREE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Integer constant."""

    value: int


@dataclass(frozen=True, slots=True)
class Variable:
    """The count ``n``."""


@dataclass(frozen=True, slots=True)
class Not:
    """Logical negation: 1 if operand is zero, else 0."""

    operand: "FormulaNode"


@dataclass(frozen=True, slots=True)
class BinaryOperation:
    """Binary operator: modulo, comparison, or short-circuit logic.

    Attributes:
        operator: One of % == != < <= > >= && ||
        left: Left operand
        right: Right operand
    """

    operator: str
    left: "FormulaNode"
    right: "FormulaNode"


@dataclass(frozen=True, slots=True)
class Conditional:
    """Ternary ``test ? if_true : if_false``."""

    test: "FormulaNode"
    if_true: "FormulaNode"
    if_false: "FormulaNode"


FormulaNode: TypeAlias = Literal | Variable | Not | BinaryOperation | Conditional
"""Any node of a compiled plural formula."""


# ============================================================================
# PARSER
# ============================================================================

_EQUALITY_OPERATORS: tuple[str, ...] = ("==", "!=")
_RELATIONAL_OPERATORS: tuple[str, ...] = ("<", "<=", ">", ">=")


class _FormulaParser:
    """Recursive-descent parser over a token list."""

    __slots__ = ("_depth", "_index", "_max_depth", "_source", "_tokens")

    def __init__(self, source: str, max_depth: int) -> None:
        self._source = source
        self._tokens = tokenize(source)
        self._index = 0
        self._depth = 0
        self._max_depth = max_depth

    def parse(self) -> FormulaNode:
        node = self._conditional()
        token = self._peek()
        if token.kind != _END:
            raise PluralFormulaError(
                ErrorTemplate.formula_unexpected_token(token.text, token.position)
            )
        return node

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != _END:
            self._index += 1
        return token

    def _accept(self, *operators: str) -> str | None:
        token = self._peek()
        if token.kind == _OPERATOR and token.text in operators:
            self._index += 1
            return token.text
        return None

    def _expect(self, operator: str) -> None:
        token = self._peek()
        if token.kind == _OPERATOR and token.text == operator:
            self._index += 1
            return
        if token.kind == _END:
            raise PluralFormulaError(
                ErrorTemplate.formula_unexpected_end(repr(operator), token.position)
            )
        raise PluralFormulaError(
            ErrorTemplate.formula_unexpected_token(token.text, token.position)
        )

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise PluralFormulaError(
                ErrorTemplate.formula_too_deep(self._max_depth, self._peek().position)
            )

    def _conditional(self) -> FormulaNode:
        self._enter()
        try:
            test = self._or()
            if self._accept("?") is None:
                return test
            if_true = self._conditional()
            self._expect(":")
            if_false = self._conditional()
            return Conditional(test, if_true, if_false)
        finally:
            self._depth -= 1

    def _or(self) -> FormulaNode:
        node = self._and()
        while self._accept("||"):
            node = BinaryOperation("||", node, self._and())
        return node

    def _and(self) -> FormulaNode:
        node = self._equality()
        while self._accept("&&"):
            node = BinaryOperation("&&", node, self._equality())
        return node

    def _equality(self) -> FormulaNode:
        node = self._relational()
        while operator := self._accept(*_EQUALITY_OPERATORS):
            node = BinaryOperation(operator, node, self._relational())
        return node

    def _relational(self) -> FormulaNode:
        node = self._modulo()
        while operator := self._accept(*_RELATIONAL_OPERATORS):
            node = BinaryOperation(operator, node, self._modulo())
        return node

    def _modulo(self) -> FormulaNode:
        node = self._unary()
        while self._accept("%"):
            divisor = self._unary()
            if divisor == Literal(0):
                raise PluralFormulaError(ErrorTemplate.formula_division_by_zero(self._source))
            node = BinaryOperation("%", node, divisor)
        return node

    def _unary(self) -> FormulaNode:
        if self._accept("!"):
            self._enter()
            try:
                return Not(self._unary())
            finally:
                self._depth -= 1
        return self._primary()

    def _primary(self) -> FormulaNode:
        token = self._advance()
        match token.kind:
            case "integer":
                return Literal(int(token.text))
            case "n":
                return Variable()
            case "operator" if token.text == "(":
                node = self._conditional()
                self._expect(")")
                return node
            case "end":
                raise PluralFormulaError(
                    ErrorTemplate.formula_unexpected_end("an operand", token.position)
                )
            case _:
                raise PluralFormulaError(
                    ErrorTemplate.formula_unexpected_token(token.text, token.position)
                )


# ============================================================================
# EVALUATION
# ============================================================================


def _children(node: FormulaNode) -> tuple[FormulaNode, ...]:
    match node:
        case Not(operand=operand):
            return (operand,)
        case BinaryOperation(left=left, right=right):
            return (left, right)
        case Conditional(test=test, if_true=if_true, if_false=if_false):
            return (test, if_true, if_false)
    return ()


def _tree_height(root: FormulaNode) -> int:
    # Iterative so that a long left-associative chain such as n%2%2%2...
    # is measured without recursing once per operator.
    height = 0
    stack: list[tuple[FormulaNode, int]] = [(root, 1)]
    while stack:
        node, level = stack.pop()
        height = max(height, level)
        stack.extend((child, level + 1) for child in _children(node))
    return height


def _c_modulo(dividend: int, divisor: int) -> int:
    # C truncates toward zero: the remainder takes the dividend's sign.
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


def _evaluate(node: FormulaNode, n: int) -> int:  # noqa: PLR0911 - one return per node kind
    match node:
        case Literal(value=value):
            return value
        case Variable():
            return n
        case Not(operand=operand):
            return int(not _evaluate(operand, n))
        case Conditional(test=test, if_true=if_true, if_false=if_false):
            branch = if_true if _evaluate(test, n) else if_false
            return _evaluate(branch, n)
        case BinaryOperation(operator="&&", left=left, right=right):
            return int(bool(_evaluate(left, n)) and bool(_evaluate(right, n)))
        case BinaryOperation(operator="||", left=left, right=right):
            return int(bool(_evaluate(left, n)) or bool(_evaluate(right, n)))
        case BinaryOperation(operator=operator, left=left, right=right):
            return _apply(operator, _evaluate(left, n), _evaluate(right, n))
    msg = f"Unknown formula node: {node!r}"
    raise TypeError(msg)


def _apply(operator: str, left: int, right: int) -> int:  # noqa: PLR0911 - one return per operator
    match operator:
        case "%":
            if right == 0:
                raise ZeroDivisionError
            return _c_modulo(left, right)
        case "==":
            return int(left == right)
        case "!=":
            return int(left != right)
        case "<":
            return int(left < right)
        case "<=":
            return int(left <= right)
        case ">":
            return int(left > right)
        case ">=":
            return int(left >= right)
    msg = f"Unknown operator: {operator!r}"
    raise TypeError(msg)


class PluralFormula:
    """Compiled plural formula.

    Parses the formula once at construction and evaluates the resulting
    tree on every call. Construction fails for malformed formulas, so a
    PluralFormula that exists is always callable.

    Example:
        >>> formula = PluralFormula("n%10==1 && n%100!=11 ? 0 : n!=0 ? 1 : 2")
        >>> [formula(n) for n in (0, 1, 2, 11, 21)]
        [2, 0, 1, 1, 0]
        >>> PluralFormula("(n != 1)")(1)
        0
    """

    __slots__ = ("_root", "_source")

    def __init__(
        self,
        source: str,
        *,
        max_depth: int = MAX_FORMULA_DEPTH,
        max_length: int = MAX_FORMULA_LENGTH,
    ) -> None:
        """Compile formula source.

        Args:
            source: C-style plural expression with ``n`` as the count
            max_depth: Maximum nesting of parentheses, ternaries and negations
            max_length: Maximum formula length in characters

        Raises:
            PluralFormulaError: If the formula is empty, too long, too deep,
                contains characters outside the grammar, or is malformed
        """
        if len(source) > max_length:
            raise PluralFormulaError(ErrorTemplate.formula_too_long(len(source), max_length))
        self._source = source
        root = _FormulaParser(source, max_depth).parse()
        if _tree_height(root) > max_depth:
            raise PluralFormulaError(ErrorTemplate.formula_too_deep(max_depth))
        self._root: FormulaNode = root

    @property
    def source(self) -> str:
        """Formula text this evaluator was compiled from."""
        return self._source

    @property
    def root(self) -> FormulaNode:
        """Root node of the compiled expression tree."""
        return self._root

    def __call__(self, n: int) -> int:
        """Return the plural category index for count n.

        Raises:
            PluralFormulaError: If evaluation divides by a computed zero
        """
        try:
            return _evaluate(self._root, n)
        except ZeroDivisionError:
            raise PluralFormulaError(
                ErrorTemplate.formula_division_by_zero(self._source, n)
            ) from None

    def __repr__(self) -> str:
        return f"PluralFormula({self._source!r})"


def compile_plural_formula(source: str) -> PluralFormula:
    """Compile a plural expression into a reusable evaluator.

    Args:
        source: Expression part of a Plural-Forms header (after ``plural=``)

    Returns:
        Compiled PluralFormula

    Raises:
        PluralFormulaError: If the expression cannot be compiled
    """
    return PluralFormula(source)
