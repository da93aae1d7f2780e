class Error(Exception):
  """
  Base of the closed error family.
  Every error carries a human-readable `.msg`.
  """

  @property
  def msg(self):
    raise NotImplementedError

  def __str__(self):
    return self.msg

  def __eq__(self, other):
    return type(self) == type(other) and self.args == other.args

  def __hash__(self):
    return hash((type(self), self.args))


class BindingError(Error):
  """ A variable was referenced that has no entry in the bindings """

  def __init__(self, label):
    super().__init__(label)
    self.label = label

  @property
  def msg(self):
    return f'Unbound variable: {self.label}'

  def __repr__(self):
    return f'BindingError({self.label!r})'


class ParserError(Error):
  """ Raised by the text parser; evaluation never produces it """

  def __init__(self, msg):
    super().__init__(msg)
    self._msg = msg

  @property
  def msg(self):
    return self._msg

  def __repr__(self):
    return f'ParserError({self._msg!r})'
