class Store:
  """Dense positional sequence of (key, value) entries."""

  __slots__ = ('_entries',)

  def __init__(self, entries=()):
    self._entries = [tuple(entry) for entry in entries]

  def __len__(self):
    return len(self._entries)

  def __iter__(self):
    return iter(self._entries)

  def __repr__(self):
    return f'Store({self._entries!r})'

  def append(self, entry):
    self._entries.append(entry)
    return len(self._entries) - 1

  def read(self, index):
    self._ensure(index)
    return self._entries[index]

  def write(self, index, entry):
    self._ensure(index)
    self._entries[index] = entry

  def insert(self, index, entry):
    if not 0 <= index <= len(self._entries):
      raise IndexError(
          f'Cannot insert at position {index} into store of '
          f'length {len(self._entries)}.')
    self._entries.insert(index, entry)

  def remove(self, index):
    self._ensure(index)
    return self._entries.pop(index)

  def pop(self):
    if not self._entries:
      raise IndexError('Cannot pop from empty store.')
    return self._entries.pop()

  def swap(self, i, j):
    self._ensure(i)
    self._ensure(j)
    entries = self._entries
    entries[i], entries[j] = entries[j], entries[i]

  def clear(self):
    self._entries.clear()

  def _ensure(self, index):
    ensure_int(index)
    if not 0 <= index < len(self._entries):
      raise IndexError(
          f'Position {index} out of range for length {len(self._entries)}.')


def ensure_int(index):
  if isinstance(index, bool) or not isinstance(index, int):
    raise TypeError(
        f"Position must be an int but got '{type(index).__name__}'.")
  return index
