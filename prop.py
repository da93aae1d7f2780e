from pretty import *
from typing import *
import enum
import re

class PropKind(enum.Enum):
  IMPLIES = 'implies'
  DISJ    = 'disj'
  CONJ    = 'conj'
  NOT     = 'not'

  VAR     = 'var'


BINARY_KINDS = (PropKind.CONJ, PropKind.DISJ, PropKind.IMPLIES)


class Prop:

  """

  Represents a propositional formula.
  This class contains no evaluation logic; it is a data class
  that also knows how to print itself.

  Instances are created with a kind, as well as 0 or more
  children, which are expected to also be instances of Prop.
  The helper constructors below are the usual way to build them.

  An example to represent the proposition 'a implies b' is:
  >>> A = Var('a')
  >>> B = Var('b')
  >>> implication = Impl(A, B)

  If the proposition is a binary op, its children may be accessed
  with the use of .left and .right:
  >>> assert implication.left == A
  >>> assert implication.right == B

  If it's a negation, its child may be accessed via .contained:
  >>> not_A = Neg(A)
  >>> assert not_A.contained == A

  Props are immutable; assigning to an attribute raises AttributeError.

  """

  __slots__ = ('kind', 'args')

  def __init__(self, kind, *args):
    object.__setattr__(self, 'kind', kind)
    object.__setattr__(self, 'args', args)

  def __setattr__(self, name, value):
    raise AttributeError(f"Prop is immutable; cannot set '{name}'")

  def __delattr__(self, name):
    raise AttributeError(f"Prop is immutable; cannot delete '{name}'")

  # convenience .left and .right for binary ops
  @property
  def left(self): return self.args[0]
  @property
  def right(self): return self.args[1]

  # convenience .contained for negation
  @property
  def contained(self): return self.args[0]

  # convenience .label for variables
  @property
  def label(self): return self.args[0]

  @property
  def is_binary(self):
    return self.kind in BINARY_KINDS

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.kind == other.kind
      and self.args == other.args)

  def __hash__(self):
    return hash((self.kind, self.args))

  @property
  def sigil(self):
    return {
      PropKind.IMPLIES: pretty_IMPLIES,
      PropKind.DISJ   : pretty_DISJ,
      PropKind.CONJ   : pretty_CONJ,
      PropKind.NOT    : pretty_NOT,
    }[self.kind]

  def prettify(self):
    """
    Fully parenthesized rendering: every binary op gets its own braces,
    including the outermost one.
    """
    if self.kind == PropKind.VAR:
      return str(self.label)
    elif self.kind == PropKind.NOT:
      pretty_contained = self.contained.prettify()
      return f'{self.sigil}{pretty_contained}'
    else:
      pretty_left = self.left.prettify()
      pretty_right = self.right.prettify()
      return f'{pretty_OPEN}{pretty_left} {self.sigil} {pretty_right}{pretty_CLOSE}'

  def eval(self, bindings):
    from evaluate import evaluate
    return evaluate(self, bindings)

  def __str__(self):
    return render(self)

  def __repr__(self):
    return f'|{self}|'


def Var(label: str) -> Prop:
  return Prop(PropKind.VAR, label)

def Neg(inner: Prop) -> Prop:
  return Prop(PropKind.NOT, inner)

def Conj(left: Prop, right: Prop) -> Prop:
  return Prop(PropKind.CONJ, left, right)

def Disj(left: Prop, right: Prop) -> Prop:
  return Prop(PropKind.DISJ, left, right)

def Impl(left: Prop, right: Prop) -> Prop:
  return Prop(PropKind.IMPLIES, left, right)


OUTER_PARENS = re.compile(r'\((.*?)\)')

def strip_outer_parens(text: str) -> str:
  """
  Remove one pair of braces if the text starts with '(' and ends with ')'.
  Only the first and last characters are looked at; the braces are not
  checked for being a matching pair.
  """
  match = OUTER_PARENS.fullmatch(text)
  if match is None:
    return text
  return match.group(1)

def render(prop: Prop) -> str:
  """
  Canonical rendering of a proposition, e.g. 'p ⇒ ¬(q ∨ r)'
  """
  return strip_outer_parens(prop.prettify())

if __name__ == '__main__':

  import testing

  class Tests(testing.Tests):

    def test_1(self):

      prop = \
        Neg(
          Conj(
            Neg(Var('a')),
            Var('a')))

      expected = f"{pretty_NOT}({pretty_NOT}a {pretty_CONJ} a)"
      actual = str(prop)

      self.assertEq(expected, actual)

  Tests().go()
