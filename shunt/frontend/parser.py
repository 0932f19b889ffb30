from __future__ import annotations
from typing import List
import logging

from shunt.frontend.utils import *
from shunt.frontend.lexer import tokenize

logger = logging.getLogger(__name__)

# Shunting-yard, see https://en.wikipedia.org/wiki/Shunting_yard_algorithm
#
# Operators of equal precedence don't pop each other by default: the later one
# is stacked above the earlier and drained first, so `8 - 3 - 2` comes out as
# `8 3 2 - -`, i.e. grouped as `8 - (3 - 2)`. Pass left_associative=True to
# get `8 3 - 2 -` instead.

def _pops_before(top: Token, tok: Token, left_associative: bool) -> bool:
    # Lower precedence rank binds tighter; parens never pop
    if top.token_id != TokenId.OPERATOR:
        return False
    if left_associative:
        return top.precedence() <= tok.precedence()
    return top.precedence() < tok.precedence()

def reorder(tokens: List[Token], left_associative: bool = False) -> List[Token]:
    """Returns @tokens in postfix order, without parens and EOF.

    Consumption stops at the first EOF token. Raises UnmatchedParen when a
    parenthesis is left without its partner.
    """
    output = []
    stack = []

    for tok in tokens:
        if tok.token_id == TokenId.NUMBER:
            output.append(tok)
        elif tok.token_id == TokenId.LPAREN:
            stack.append(tok)
        elif tok.token_id == TokenId.RPAREN:
            while True:
                if not stack:
                    raise UnmatchedParen("')' without matching '('")
                top = stack.pop()
                if top.token_id == TokenId.LPAREN:
                    break
                output.append(top)
        elif tok.token_id == TokenId.OPERATOR:
            while stack and _pops_before(stack[-1], tok, left_associative):
                output.append(stack.pop())
            stack.append(tok)
        elif tok.token_id == TokenId.EOF:
            break
        else:
            raise ValueError(f'Unknown token {tok!r}')

        logger.debug('Consumed %r', tok)

    while stack:
        top = stack.pop()
        if top.token_id == TokenId.LPAREN:
            raise UnmatchedParen("'(' never closed")
        output.append(top)

    return output

def parse(src: str, left_associative: bool = False) -> List[Token]:
    return reorder(tokenize(src), left_associative=left_associative)
