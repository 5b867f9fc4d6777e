"""Condition Language Parser.

Turns a condition string such as ``2+ Ash Blossom AND (Maxx "C" OR Nibiru)`` into a
condition tree.

Grammar:
    expr      := term (("AND" | "OR") term)*
    term      := "(" expr ")" | leaf
    leaf      := [quantity] card_name
    quantity  := integer "+"? followed by whitespace

``AND`` and ``OR`` are matched as whole, uppercase words. Both may not be mixed at
the same nesting level without parentheses. A quantity of ``N+`` means "at least N";
a bare ``N`` means "exactly N"; no quantity means exactly one copy. A number standing
alone is a card name (YDK passcodes are used as names when no lookup is available).
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ygo_hand_sim.errors import ParseError
from ygo_hand_sim.models.condition import AndCondition, CardCondition, Condition, OrCondition

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(?P<lparen>\()|(?P<rparen>\))|(?P<word>[^\s()]+)")
_QUANTITY_RE = re.compile(r"^(\d+)(\+?)$")
_GLUED_QUANTITY_RE = re.compile(r"^\d+\+")

KEYWORDS = ("AND", "OR")
MAX_NESTING_DEPTH = 100

LPAREN = "("
RPAREN = ")"
WORD = "word"


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    start: int
    end: int


def tokenize(text: str) -> List[Token]:
    """
    Split a condition string into parenthesis, keyword and word tokens.

    Whitespace separates tokens and is otherwise dropped; keyword tokens use the
    keyword itself as their kind.
    """
    tokens: List[Token] = []
    for m in _TOKEN_RE.finditer(text):
        value = m.group(0)
        if m.lastgroup == "lparen":
            kind = LPAREN
        elif m.lastgroup == "rparen":
            kind = RPAREN
        elif value in KEYWORDS:
            kind = value
        else:
            kind = WORD
        tokens.append(Token(kind, value, m.start(), m.end()))
    return tokens


class _ConditionParser:
    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0
        self.depth = 0

    def error(self, reason: str, position: int) -> ParseError:
        return ParseError(reason, position, self.text)

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse(self) -> Condition:
        if not self.tokens:
            raise self.error("Empty condition", 0)
        node = self.parse_expr()
        token = self.peek()
        if token is not None:
            if token.kind == RPAREN:
                raise self.error("Unbalanced parentheses: unexpected ')'", token.start)
            raise self.error(f"Unexpected trailing input {token.value!r}", token.start)
        return node

    def parse_expr(self) -> Condition:
        children = [self.parse_term()]
        connective: Optional[str] = None
        while True:
            token = self.peek()
            if token is None or token.kind not in KEYWORDS:
                break
            self.advance()
            if connective is None:
                connective = token.kind
            elif token.kind != connective:
                raise self.error(
                    f"Cannot mix {connective} and {token.kind} at the same level; "
                    "use parentheses",
                    token.start,
                )
            children.append(self.parse_term())

        if connective is None:
            return children[0]
        if connective == "AND":
            return AndCondition(conditions=children)
        return OrCondition(conditions=children)

    def parse_term(self) -> Condition:
        token = self.peek()
        if token is None:
            raise self.error("Expected a card condition", len(self.text))
        if token.kind == LPAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise self.error(
                    f"Nesting too deep; at most {MAX_NESTING_DEPTH} levels of parentheses",
                    token.start,
                )
            self.advance()
            inner = self.peek()
            if inner is not None and inner.kind == RPAREN:
                raise self.error("Empty group", token.start)
            self.depth += 1
            node = self.parse_expr()
            self.depth -= 1
            closing = self.peek()
            if closing is None or closing.kind != RPAREN:
                raise self.error("Unbalanced parentheses: missing ')'", token.start)
            self.advance()
            return node
        if token.kind == WORD:
            return self.parse_leaf()
        raise self.error(f"Expected a card condition before {token.value!r}", token.start)

    def parse_leaf(self) -> CardCondition:
        words: List[Token] = []
        while True:
            token = self.peek()
            if token is None or token.kind != WORD:
                break
            words.append(self.advance())

        first = words[0]
        quantity = 1
        operator = "="
        m = _QUANTITY_RE.match(first.value)
        if m and (len(words) > 1 or m.group(2)):
            quantity = int(m.group(1))
            operator = ">=" if m.group(2) else "="
            words = words[1:]
            if not words:
                raise self.error("Missing card name after quantity", first.end)
        elif _GLUED_QUANTITY_RE.match(first.value):
            raise self.error(
                f"Malformed quantity {first.value!r}; expected a space after '+'",
                first.start,
            )

        card_name = self.text[words[0].start:words[-1].end]
        return CardCondition(card_name=card_name, quantity=quantity, operator=operator)


def parse_condition(text: str) -> Condition:
    """
    Parse a condition string into a condition tree.

    Args:
        text: Condition string, e.g. ``"3+ CardA AND (CardB OR CardC)"``.

    Returns:
        The root CardCondition, AndCondition or OrCondition.

    Raises:
        ParseError: If the text does not match the condition grammar.
    """
    node = _ConditionParser(text).parse()
    logger.debug(f"Parsed condition {text!r} as {node.kind}")
    return node
