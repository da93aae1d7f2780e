
class Tests:

  """
  Base class for test suites.
  Subclasses define test_* methods; run them with .go(),
  or let pytest collect the subclass.
  """

  def assertEq(self, expected, actual):
    if expected != actual:
      raise AssertionError(f"Expected:\n\t{expected!r}\nBut got:\n\t{actual!r}")

  def assertTrue(self, value, message=''):
    if not value:
      raise AssertionError(message or f"Expected a true value, got {value!r}")

  def assertRaises(self, exc_type, fn, *args):
    try:
      fn(*args)
    except exc_type as e:
      return e
    raise AssertionError(f"Expected {exc_type.__name__} to be raised")

  def go(self):
    test_names = [
      key for key in type(self).__dict__
      if key.startswith('test')
    ]

    for name in test_names:
      getattr(self, name)()
