"""
Reading permutations given in cycle notation.

A permutation is written as a product of cycles, e.g. `(1,2,3)(4,5)`. The
cycles need not be disjoint, they are composed left to right. The empty string
and `()` (which is how the identity is displayed) both denote the identity.
"""

import re

from .errors import (
    ParseError, InvalidCharacterError, MissingOpenError, StraySeparatorError,
    StrayTerminatorError, EmptyCycleError, UnterminatedCycleError)
from .permutations import Permutation, from_cycles, identity


ELEMENT_SEP_RE = r' *, *'
CYCLE_RE = rf'\( *(\d+(?:{ELEMENT_SEP_RE}\d+)*) *\)'
PERM_LIST_TOKEN_RE = rf'(?:{CYCLE_RE})+|\(\)'


def string_to_cycles(s):
    """Split cycle notation into a list of cycles.

    This is strict: every cycle has to be of the form `(i,j,...,k)` with at
    least one point, and anything else raises a ParseError subclass describing
    the first problem found.
    """
    for pos, c in enumerate(s):
        if not (c.isdigit() and c.isascii()) and c not in '(),' \
                and not c.isspace():
            raise InvalidCharacterError(
                f'unexpected character {c!r}', s, pos)

    cycles = []
    cycle = None
    # what the current cycle expects next: 'point' or 'sep_or_close'
    expect = None
    pos = 0

    while pos < len(s):
        c = s[pos]
        if c.isspace():
            pos += 1
            continue

        if cycle is None:
            if c == '(':
                cycle = []
                expect = 'point'
                cycle_start = pos
            elif c == ')':
                raise StrayTerminatorError('unmatched ")"', s, pos)
            else:
                raise MissingOpenError('cycle does not start with "("', s, pos)
            pos += 1
            continue

        if c.isdigit():
            if expect != 'point':
                raise StraySeparatorError('missing "," between points', s, pos)
            end = pos
            while end < len(s) and s[end].isdigit():
                end += 1
            cycle.append(int(s[pos:end]))
            expect = 'sep_or_close'
            pos = end
        elif c == ',':
            if expect != 'sep_or_close':
                raise StraySeparatorError('"," without a preceding point',
                                          s, pos)
            expect = 'point'
            pos += 1
        elif c == ')':
            if not cycle:
                raise EmptyCycleError('empty cycle', s, pos)
            if expect != 'sep_or_close':
                raise StraySeparatorError('"," without a following point',
                                          s, pos)
            cycles.append(cycle)
            cycle = None
            pos += 1
        else:
            raise UnterminatedCycleError(
                'new cycle opened inside a cycle', s, pos)

    if cycle is not None:
        raise UnterminatedCycleError('unterminated cycle', s, cycle_start)

    return cycles


def parse_perm(s, cls=Permutation):
    """Parse a permutation given as a product of cycles.
    """
    stripped = s.strip()
    if not stripped or stripped == '()':
        return identity(cls)
    return from_cycles(string_to_cycles(s), cls)


def perm(s):
    """Shorthand for `parse_perm(s)`.
    """
    return parse_perm(s)


def parse_perm_regex(s, cls=Permutation):
    """Parse a permutation using a permissive regular expression.

    The cycles are extracted with a regular expression and the input is
    accepted only if writing those cycles back reproduces it (up to
    whitespace). This can't tell what went wrong, so it only ever raises a
    plain ParseError.
    """
    stripped = re.sub(r'\s', '', s)
    if not stripped or stripped == '()':
        return identity(cls)

    cycles = [
        list(map(int, re.split(ELEMENT_SEP_RE, m.group(1).strip())))
        for m in re.finditer(CYCLE_RE, stripped)
    ]
    rebuilt = ''.join('(%s)' % ','.join(map(str, c)) for c in cycles)
    if rebuilt != stripped:
        raise ParseError('could not parse permutation', s)
    return from_cycles(cycles, cls)


def parse_perm_list(s, cls=Permutation):
    """Parse a list of permutations, each given as a product of cycles.

    Permutations are separated by commas or whitespace between cycles, e.g.
    `(1,2), (1,2,3)(4,5)`.
    """
    perms = []
    for match in re.finditer(PERM_LIST_TOKEN_RE + r'|,|\s+|.', s):
        token = match.group()
        if token == ',' or token.isspace():
            continue
        if not token.startswith('('):
            raise ParseError('could not parse permutation list', s,
                             match.start())
        perms.append(parse_perm(token, cls))
    return perms
