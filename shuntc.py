#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from shunt.frontend.lexer import tokenize
from shunt.frontend.parser import reorder
from shunt.frontend.utils import ParseError, format_tokens

logger = logging.getLogger('shuntc')

def emit(tokens, fmt: str):
    if fmt == 'repr':
        for tok in tokens:
            print(repr(tok))
    else:
        print(format_tokens(tokens))

def run(line: str, args) -> int:
    try:
        toks = tokenize(line)
        if not args.lex_only:
            toks = reorder(toks, left_associative=args.left_assoc)
    except ParseError as e:
        logger.debug(f'Rejected {line!r}: {type(e).__name__}')
        print(f'error: {e}', file=sys.stderr)
        return 1

    emit(toks, args.format)
    return 0

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='shuntc',
        description='Converts an arithmetic expression to postfix order',
        epilog='Reads a single line from stdin unless -e is given')

    parser.add_argument('-e', '--expr', dest='expr', default=None)
    parser.add_argument('-f', '--format', dest='format', choices=['rpn', 'repr'], default='rpn')
    parser.add_argument('-L', '--lex-only', dest='lex_only', action='store_true', default=False)
    parser.add_argument('--left-assoc', dest='left_assoc', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    line = args.expr if args.expr is not None else sys.stdin.readline()
    return run(line, args)

if __name__ == '__main__':
    sys.exit(main())
