from __future__ import annotations
from typing import List
import logging

from shunt.frontend.utils import *

logger = logging.getLogger(__name__)

_digits = '0123456789'
_terminators = ';\n'

_char_map = {
    '*': Token.op(Operator.MUL),
    '/': Token.op(Operator.DIV),
    '+': Token.op(Operator.ADD),
    '-': Token.op(Operator.SUB),
    '(': LPAREN,
    ')': RPAREN,
}

def tokenize(src: str) -> List[Token]:
    """Splits @src into tokens, folding runs of digits into one literal.

    Scanning stops at the first ';' or newline, which is emitted as EOF.
    Without one the result carries no EOF at all.
    """
    tokens = []

    for i, char in enumerate(src):
        if char == ' ':
            continue
        elif char in _terminators:
            tokens.append(EOF)
            if src[i + 1:].strip():
                logger.warning(f'Ignoring input after terminator: {src[i + 1:]!r}')
            break
        elif char in _char_map:
            tokens.append(_char_map[char])
        elif char in _digits:
            digit = ord(char) - ord('0')
            # Merge with the last literal, spaces in between included
            if tokens and tokens[-1].token_id == TokenId.NUMBER:
                value = tokens.pop().value * 10 + digit
                if value > INT_MAX:
                    raise LiteralOverflow(char=char, position=i)
                tokens.append(Token.number(value))
            else:
                tokens.append(Token.number(digit))
        else:
            raise BadInput(char=char, position=i)

    logger.debug('Tokens: %s', tokens)
    return tokens
