from __future__ import annotations
from enum import Enum, auto
from typing import Any, List, NamedTuple

# Precedence ranks: lower binds tighter.
PREC_EOF = 0
PREC_TERM = 1
PREC_MUL = 2
PREC_ADD = 3
PREC_PAREN = 4

# Literals are signed 32-bit integers.
INT_MAX = 2**31 - 1

class Operator(Enum):
    MUL = '*'
    DIV = '/'
    ADD = '+'
    SUB = '-'

    @property
    def symbol(self) -> str:
        return self.value

    def precedence(self) -> int:
        if self in (Operator.MUL, Operator.DIV):
            return PREC_MUL
        return PREC_ADD

class TokenId(Enum):
    EOF = auto()
    NUMBER = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()

class Token(NamedTuple):
    token_id: TokenId
    value: Any = None

    @staticmethod
    def number(value: int) -> Token:
        return Token(TokenId.NUMBER, value)

    @staticmethod
    def op(operator: Operator) -> Token:
        return Token(TokenId.OPERATOR, operator)

    def precedence(self) -> int:
        if self.token_id == TokenId.EOF:
            return PREC_EOF
        elif self.token_id == TokenId.NUMBER:
            return PREC_TERM
        elif self.token_id == TokenId.OPERATOR:
            return self.value.precedence()
        return PREC_PAREN

    def __repr__(self) -> str:
        if self.token_id == TokenId.NUMBER:
            return f'Number({self.value})'
        elif self.token_id == TokenId.OPERATOR:
            return f'Operation({self.value.name.capitalize()})'
        return _plain_names[self.token_id]

    def __str__(self) -> str:
        if self.token_id == TokenId.NUMBER:
            return str(self.value)
        elif self.token_id == TokenId.OPERATOR:
            return self.value.symbol
        return _plain_text[self.token_id]

_plain_names = {
    TokenId.EOF: 'EOF',
    TokenId.LPAREN: 'LeftParen',
    TokenId.RPAREN: 'RightParen',
}

_plain_text = {
    TokenId.EOF: ';',
    TokenId.LPAREN: '(',
    TokenId.RPAREN: ')',
}

EOF = Token(TokenId.EOF)
LPAREN = Token(TokenId.LPAREN)
RPAREN = Token(TokenId.RPAREN)

def format_tokens(tokens: List[Token]) -> str:
    return ' '.join(str(tok) for tok in tokens)

class ParseError(Exception):
    """Base class of everything the front end rejects."""
    message = 'could not parse input'

    def __init__(self, message: str = None) -> None:
        super().__init__(message or self.message)

class BadInput(ParseError):
    """An unrecognized character was seen while tokenizing.

    @char and @position are informational only.
    """
    message = 'something in your input is bad, good luck'

    def __init__(self, message: str = None, char: str = None, position: int = None) -> None:
        super().__init__(message)
        self.char = char
        self.position = position

class LiteralOverflow(BadInput):
    message = f'integer literal exceeds {INT_MAX}'

class UnmatchedParen(ParseError):
    message = 'unmatched parenthesis'
