import logging

from prop import Prop, PropKind
from errors import ParserError
from pretty import *

logger = logging.getLogger(__name__)

OPEN_chars    = [pretty_OPEN, '[', '{']
CLOSE_chars   = [pretty_CLOSE, ']', '}']
IMPLIES_chars = [pretty_IMPLIES, '>']
DISJ_chars    = [pretty_DISJ, '|']
CONJ_chars    = [pretty_CONJ, '&', '^', '.']
NOT_chars     = [pretty_NOT, '~', '-', '!']

BINOPS_chars = [
  *IMPLIES_chars,
  *DISJ_chars,
  *CONJ_chars,
]

def parse(string):
  """
  Parse a proposition, returning a Prop object.
  Raises ParserError if the string is not a valid proposition.
  """
  no_spaces = ''.join(c for c in string if c != ' ')
  if no_spaces == '':
    raise ParserError('Empty proposition')
  node, leftover = parse_top(no_spaces)
  if leftover != '':
    raise ParserError(f"Unexpected leftover: '{leftover}'")
  logger.debug(f"Parsed '{string}' as {node!r}")
  return node

def binop_kind(op):
  """
  Given a binary operator, e.g. '>', return its kind as a PropKind value
  """
  if op in IMPLIES_chars: return PropKind.IMPLIES
  elif op in DISJ_chars : return PropKind.DISJ
  elif op in CONJ_chars : return PropKind.CONJ
  else: raise ParserError(f"Unrecognized operator '{op}'")

def parse_top(rest):
  """
  Top-level parsing function.
  Takes a string and returns a tuple (prop, rest)
  where `prop` is a parsed proposition and `rest`
  is the remaining input.

  Binary operators are right-associative and share one precedence,
  so 'a>b.c' reads as 'a>(b.c)'.
  """

  # We start assuming that we're parsing a
  # binary operator, ...

  left, rest = parse_simple(rest)

  # ... but then return early if we decide
  # that it actually wasn't a binary operator application
  if len(rest) == 0 or rest[0] not in BINOPS_chars:
    return left, rest

  op = rest[0]
  rest = rest[1:]
  right, rest = parse_top(rest)

  node = Prop(binop_kind(op), left, right)
  return (node, rest)

def parse_simple(rest):
  """
  Attempt to parse anything besides a binary operator
  """

  if len(rest) == 0:
    raise ParserError('Unexpected end of input')

  if rest[0] in OPEN_chars:
    node, rest = parse_top(rest[1:])
    if len(rest) == 0 or rest[0] not in CLOSE_chars:
      raise ParserError('Unclosed brace')
    rest = rest[1:]
    return (node, rest)

  elif rest[0] in NOT_chars:
    child, rest = parse_simple(rest[1:])
    node = Prop(PropKind.NOT, child)
    return (node, rest)

  elif rest[0] in CLOSE_chars or rest[0] in BINOPS_chars:
    raise ParserError(f"Unexpected '{rest[0]}'")

  else:
    node = Prop(PropKind.VAR, rest[0])
    return (node, rest[1:])

if __name__ == '__main__':

  import testing
  from prop import Var, Neg, Conj

  class Tests(testing.Tests):

    def test_1(self):

      expected = \
        Conj(
          Neg(Var('a')),
          Var('b'))

      actual = parse('-a.b')

      self.assertEq(expected, actual)

  Tests().go()
