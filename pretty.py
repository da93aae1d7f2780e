"""
Glyphs used when printing propositions.
The parser accepts each of these as well.
"""

pretty_OPEN    = '('
pretty_CLOSE   = ')'

pretty_NOT     = '¬'
pretty_IMPLIES = '⇒'

# CONJ combines with `and` but prints as '∨'; DISJ is the reverse.
# This pairing is load-bearing: rendered output and the parser both rely on it.
pretty_CONJ    = '∨'
pretty_DISJ    = '∧'
