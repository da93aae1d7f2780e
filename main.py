import logging

from parse import parse
from truth import ordered_var_names, evaluate_table

logger = logging.getLogger(__name__)


def tabulate(string):
  """
  Parse a proposition and evaluate it on every row of its truth table.
  Returns a list of (bindings, value) pairs.
  """
  proposition = parse(string)
  table = evaluate_table(proposition)
  logger.info(f"Tabulated {proposition} over {len(table)} rows")
  return table


if __name__ == '__main__':

  logging.basicConfig(level=logging.DEBUG)

  string = '((p>q).(q>r)) > (p>r)'
  print(f'string: {string}\n')

  proposition = parse(string)
  print(f'proposition: {proposition}\n')

  names = ordered_var_names(proposition)
  print(' '.join(names) + ' | ' + str(proposition))
  for bindings, value in tabulate(string):
    cells = ' '.join('T' if bindings[name] else 'F' for name in names)
    print(f"{cells} | {'T' if value else 'F'}")
