from typing import *

from prop import Prop, PropKind
from errors import Error, BindingError


"""

Evaluation of a proposition under a set of bindings.

Errors are returned, not raised: `evaluate` gives back either a bool or
an Error value. Each step hands an error straight back to its caller,
so the error that comes out is the first one met walking the tree
left to right.

Both sides of a binary op are always evaluated; nothing short-circuits.

"""


Bindings = Mapping[str, bool]
Result = Union[bool, Error]


COMBINE = {
  PropKind.CONJ   : lambda l, r: l and r,
  PropKind.DISJ   : lambda l, r: l or r,
  PropKind.IMPLIES: lambda l, r: not (l and not r),
}


def is_error(result: Result) -> bool:
  return isinstance(result, Error)

def evaluate(prop: Prop, bindings: Bindings) -> Result:
  """
  Evaluate `prop` given a mapping from variable label to bool.
  Returns BindingError(label) if a variable has no binding.
  """

  if prop.kind == PropKind.VAR:
    if prop.label not in bindings:
      return BindingError(prop.label)
    return bool(bindings[prop.label])

  elif prop.kind == PropKind.NOT:
    inner = evaluate(prop.contained, bindings)
    if is_error(inner):
      return inner
    return not inner

  elif prop.kind in COMBINE:
    left = evaluate(prop.left, bindings)
    right = evaluate(prop.right, bindings)
    if is_error(left):
      return left
    if is_error(right):
      return right
    return COMBINE[prop.kind](left, right)

  else:
    raise ValueError(f"Unrecognized proposition kind '{prop.kind}'")
