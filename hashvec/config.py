class Config(dict):
  """Flat, read-only settings of the command line driver.

  Values are bools, ints, floats, strings or non-empty tuples of one of those
  types. update() returns a modified copy and converts new values, including
  strings from the command line, to the type of the value they replace.
  """

  SCALARS = (bool, int, float, str)

  def __init__(self, *args, **kwargs):
    super().__init__()
    for key, value in dict(*args, **kwargs).items():
      dict.__setitem__(self, key, self._ensure(key, value))

  def __getattr__(self, name):
    if name.startswith('_'):
      raise AttributeError(name)
    try:
      return self[name]
    except KeyError:
      raise AttributeError(name)

  def __setattr__(self, name, value):
    raise AttributeError(
        f"Tried to set key '{name}' on immutable config. Use update().")

  def __setitem__(self, key, value):
    raise AttributeError(
        f"Tried to set key '{key}' on immutable config. Use update().")

  def __delitem__(self, key):
    raise AttributeError(f"Tried to delete key '{key}' from immutable config.")

  def update(self, *args, **kwargs):
    result = dict(self)
    for key, new in dict(*args, **kwargs).items():
      if key not in self:
        raise KeyError(
            f"Unknown config key '{key}', expected one of {sorted(self)}.")
      result[key] = self._convert(key, self[key], new)
    return type(self)(result)

  def _ensure(self, key, value):
    if isinstance(value, list):
      value = tuple(value)
    if isinstance(value, tuple):
      if not value:
        raise TypeError(
            f"Empty list for key '{key}' is disallowed because its type "
            'is unclear.')
      kind = type(value[0])
      if kind not in self.SCALARS or not all(type(x) is kind for x in value):
        raise TypeError(
            f"List for key '{key}' must hold values of a single type out of "
            f'bool, int, float, str but got {value}.')
      return value
    if type(value) not in self.SCALARS:
      raise TypeError(
          f"Unsupported type '{type(value).__name__}' for key '{key}'.")
    return value

  def _convert(self, key, old, new):
    if isinstance(old, tuple):
      if isinstance(new, str) or not isinstance(new, (tuple, list)):
        new = (new,)
      return tuple(self._convert(key, old[0], x) for x in new)
    if isinstance(new, str) and not isinstance(old, str):
      return self._parse(key, old, new)
    if isinstance(old, bool) != isinstance(new, bool):
      raise TypeError(
          f"Expected {type(old).__name__} but got '{new}' for key '{key}'.")
    if isinstance(old, int) and isinstance(new, float):
      if float(int(new)) != new:
        raise TypeError(
            f"Cannot convert fractional float {new} to int for key '{key}'.")
      return int(new)
    if isinstance(old, float) and isinstance(new, int):
      return float(new)
    if type(new) is not type(old):
      raise TypeError(
          f"Expected {type(old).__name__} but got '{new}' for key '{key}'.")
    return new

  def _parse(self, key, old, text):
    if isinstance(old, bool):
      if text not in ('True', 'False'):
        raise TypeError(f"Expected bool but got '{text}' for key '{key}'.")
      return text == 'True'
    try:
      number = float(text)  # Allow scientific notation for integers.
      if isinstance(old, int) and float(int(number)) != number:
        raise ValueError(text)
    except (ValueError, OverflowError):
      raise TypeError(
          f"Expected {type(old).__name__} but got '{text}' for key '{key}'.")
    return int(number) if isinstance(old, int) else number
