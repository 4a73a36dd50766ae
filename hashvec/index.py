class Index:
  """Mapping from keys to their current positions."""

  __slots__ = ('_positions',)

  def __init__(self):
    self._positions = {}

  def __len__(self):
    return len(self._positions)

  def __contains__(self, key):
    return key in self._positions

  def __repr__(self):
    return f'Index({self._positions!r})'

  def items(self):
    return self._positions.items()

  def lookup(self, key):
    return self._positions.get(key)

  def set(self, key, position):
    assert position >= 0, position
    self._positions[key] = position

  def remove(self, key):
    return self._positions.pop(key)

  def shift(self, threshold, delta):
    # Linear scan; positions are not ordered inside the dict.
    positions = self._positions
    for key, position in positions.items():
      if position >= threshold:
        positions[key] = position + delta

  def clear(self):
    self._positions.clear()
