import testing
from prop import Prop, PropKind, Var, Neg, Conj, Disj, Impl, render, strip_outer_parens


class TestsModel(testing.Tests):

  def test_constructors(self):
    p, q = Var('p'), Var('q')

    self.assertEq(Prop(PropKind.VAR, 'p'), p)
    self.assertEq(PropKind.NOT, Neg(p).kind)
    self.assertEq(PropKind.CONJ, Conj(p, q).kind)
    self.assertEq(PropKind.DISJ, Disj(p, q).kind)
    self.assertEq(PropKind.IMPLIES, Impl(p, q).kind)

  def test_accessors(self):
    p, q = Var('p'), Var('q')
    implication = Impl(p, q)

    self.assertEq('p', p.label)
    self.assertEq(p, implication.left)
    self.assertEq(q, implication.right)
    self.assertEq(p, Neg(p).contained)
    self.assertTrue(implication.is_binary)
    self.assertTrue(not Neg(p).is_binary)

  def test_immutable(self):
    p = Var('p')
    self.assertRaises(AttributeError, setattr, p, 'kind', PropKind.NOT)
    self.assertRaises(AttributeError, setattr, p, 'args', ('q',))
    self.assertRaises(AttributeError, delattr, p, 'args')
    self.assertEq('p', p.label)

  def test_structural_equality(self):
    self.assertEq(Impl(Var('p'), Neg(Var('q'))), Impl(Var('p'), Neg(Var('q'))))
    self.assertTrue(Conj(Var('p'), Var('q')) != Disj(Var('p'), Var('q')))
    self.assertTrue(Conj(Var('p'), Var('q')) != Conj(Var('q'), Var('p')))
    self.assertEq(hash(Neg(Var('p'))), hash(Neg(Var('p'))))
    self.assertEq(1, len({Var('p'), Var('p')}))


class TestsRender(testing.Tests):

  def test_variable(self):
    self.assertEq('p', render(Var('p')))

  def test_negated_variable(self):
    self.assertEq('¬p', render(Neg(Var('p'))))

  def test_binary_ops_lose_outer_braces(self):
    self.assertEq('p ∨ q', render(Conj(Var('p'), Var('q'))))
    self.assertEq('p ∧ q', render(Disj(Var('p'), Var('q'))))
    self.assertEq('p ⇒ q', render(Impl(Var('p'), Var('q'))))

  def test_conj_evaluates_and_but_prints_disjunction_glyph(self):
    # CONJ is the `and` operator yet prints as '∨', and DISJ the reverse.
    # Changing this pairing must be a deliberate, visible change.
    conj = Conj(Var('p'), Var('q'))
    disj = Disj(Var('p'), Var('q'))

    self.assertEq('∨', conj.sigil)
    self.assertEq('∧', disj.sigil)
    self.assertEq(False, conj.eval({'p': True, 'q': False}))
    self.assertEq(True, disj.eval({'p': True, 'q': False}))

  def test_nested(self):
    prop = Impl(Var('p'), Neg(Conj(Var('q'), Var('r'))))
    self.assertEq('(p ⇒ ¬(q ∨ r))', prop.prettify())
    self.assertEq('p ⇒ ¬(q ∨ r)', render(prop))

  def test_only_one_pair_stripped(self):
    prop = Conj(Conj(Var('p'), Var('q')), Disj(Var('r'), Var('s')))
    self.assertEq('(p ∨ q) ∨ (r ∧ s)', render(prop))

  def test_negated_compound_keeps_braces(self):
    self.assertEq('¬(p ⇒ q)', render(Neg(Impl(Var('p'), Var('q')))))

  def test_str_and_repr(self):
    prop = Impl(Var('p'), Var('q'))
    self.assertEq('p ⇒ q', str(prop))
    self.assertEq('|p ⇒ q|', repr(prop))


class TestsStripOuterParens(testing.Tests):

  def test_strips_enclosing_pair(self):
    self.assertEq('a ∨ b', strip_outer_parens('(a ∨ b)'))

  def test_leaves_unwrapped_text(self):
    self.assertEq('¬(a)', strip_outer_parens('¬(a)'))
    self.assertEq('a', strip_outer_parens('a'))
    self.assertEq('', strip_outer_parens(''))

  def test_shallow_not_balance_aware(self):
    # first and last characters are braces, but not a matching pair
    self.assertEq('a) ∨ (b', strip_outer_parens('(a) ∨ (b)'))

  def test_newline_blocks_strip(self):
    self.assertEq('(a\nb)', strip_outer_parens('(a\nb)'))


if __name__ == '__main__':
  TestsModel().go()
  TestsRender().go()
  TestsStripOuterParens().go()
