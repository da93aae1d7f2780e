from typing import *
import logging

from prop import Prop, PropKind
from evaluate import evaluate, is_error

logger = logging.getLogger(__name__)


def ordered_var_names(prop: Prop) -> Tuple[str, ...]:
  """
  The distinct variable labels of a proposition,
  in the order they are first seen reading left to right.
  """
  seen = {}

  def go(node):
    if node.kind == PropKind.VAR:
      seen.setdefault(node.label, None)
    else:
      for child in node.args:
        go(child)

  go(prop)
  return tuple(seen)

def var_names(prop: Prop) -> FrozenSet[str]:
  return frozenset(ordered_var_names(prop))

def boolean_combinations(n: int) -> List[Tuple[bool, ...]]:
  """
  Every assignment of n booleans, 2**n rows in all.

  Rows come in a fixed order: the first column changes slowest
  and True comes before False, e.g. for n=2:
    (T, T), (T, F), (F, T), (F, F)

  n=0 gives a single empty row.
  """
  if n < 0:
    raise ValueError(f"Cannot enumerate {n} variables")
  if n == 0:
    return [()]

  rows = [(True,), (False,)]
  for _ in range(n - 1):
    rows = [row + (value,) for row in rows for value in (True, False)]
  return rows

def truth_table(prop: Prop) -> List[Dict[str, bool]]:
  """
  One set of bindings per possible assignment of `prop`'s variables,
  in the order given by boolean_combinations.
  """
  names = ordered_var_names(prop)
  logger.debug(f"Enumerating {2 ** len(names)} rows over {names}")
  return [dict(zip(names, values)) for values in boolean_combinations(len(names))]

def evaluate_table(prop: Prop) -> List[Tuple[Dict[str, bool], bool]]:
  """
  Pair every truth table row with the value of `prop` on that row.
  """
  table = []
  for bindings in truth_table(prop):
    result = evaluate(prop, bindings)
    # rows cover every variable, so this can only be a bug
    assert not is_error(result), result
    table.append((bindings, result))
  return table
