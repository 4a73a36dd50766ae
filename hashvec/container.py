from . import index as indexlib
from . import store as storelib


class KeyExistsError(KeyError):
  pass


class HashVec:
  """Map whose (key, value) entries are kept in an explicit order and can be
  read both by key and by position.

  Entries live in a positional store and an index maps every key to its
  current position. All mutations go through the methods below, which update
  both so that every key points at exactly the entry that holds it. Positions
  change only through push(), insert_at(), the swap methods and removals.

  Lookups by key return None (or a given default) for absent keys. Positional
  reads outside [0, len) raise IndexError.

  Values returned by get_mut() and iterators are only valid until the next
  mutation of the container; afterwards they raise RuntimeError.
  """

  def __init__(self, pairs=(), check=False):
    self._store = storelib.Store()
    self._index = indexlib.Index()
    self._checked = bool(check)
    self._version = 0
    self.extend(pairs)

  @classmethod
  def from_pairs(cls, pairs, **kwargs):
    return cls(pairs, **kwargs)

  def __len__(self):
    return len(self._store)

  def __contains__(self, key):
    return key in self._index

  def __iter__(self):
    return self._iterate(lambda entry: entry)

  def __getitem__(self, position):
    if isinstance(position, bool) or not isinstance(position, int):
      raise TypeError(
          f"HashVec positions must be ints, not '{type(position).__name__}'. "
          'Use get() to look up values by key.')
    return self._store.read(position)

  def __eq__(self, other):
    if not isinstance(other, HashVec):
      return NotImplemented
    return list(self._store) == list(other._store)

  __hash__ = None

  def __repr__(self):
    return f'{type(self).__name__}({list(self._store)!r})'

  def is_empty(self):
    return not len(self._store)

  def contains_key(self, key):
    return key in self._index

  def keys(self):
    return self._iterate(lambda entry: entry[0])

  def values(self):
    return self._iterate(lambda entry: entry[1])

  def items(self):
    return self._iterate(lambda entry: entry)

  def copy(self):
    return type(self)(self, check=self._checked)

  def get(self, key, default=None):
    position = self._index.lookup(key)
    if position is None:
      return default
    return self._store.read(position)[1]

  def get_mut(self, key):
    if key not in self._index:
      return None
    return ValueRef(self, key)

  def index(self, key):
    return self._index.lookup(key)

  def insert(self, key, value):
    """Insert a value, or overwrite it in place if the key exists."""
    position = self._index.lookup(key)
    if position is None:
      self._index.set(key, self._store.append((key, value)))
    else:
      stored, _ = self._store.read(position)
      self._store.write(position, (stored, value))
    self._modified()

  def push(self, entry):
    """Append an entry, moving an existing entry with the same key to the
    end."""
    key, value = entry
    position = self._index.lookup(key)
    if position is not None:
      self._delete(position)
    self._index.set(key, self._store.append((key, value)))
    self._modified()

  def insert_at(self, position, key, value):
    """Insert an entry at the given position, shifting later entries back.

    An existing entry with the same key is removed first and the position is
    counted after that removal.
    """
    storelib.ensure_int(position)
    existing = self._index.lookup(key)
    limit = len(self._store) - (existing is not None)
    if not 0 <= position <= limit:
      raise IndexError(
          f'Cannot insert at position {position} into HashVec of '
          f'length {limit}.')
    if existing is not None:
      self._delete(existing)
    self._index.shift(position, 1)
    self._store.insert(position, (key, value))
    self._index.set(key, position)
    self._modified()

  def extend(self, pairs):
    pairs = [tuple(pair) for pair in pairs]
    for pair in pairs:
      if len(pair) != 2:
        raise ValueError(f'Expected a (key, value) pair but got {pair!r}.')
      hash(pair[0])
    for pair in pairs:
      self.push(pair)

  def append(self, other):
    """Move all entries of another HashVec to the end of this one."""
    if not isinstance(other, HashVec):
      raise TypeError(f"Cannot append '{type(other).__name__}' to HashVec.")
    for entry in other.drain():
      self.push(entry)

  def rename(self, old, new, default=None):
    """Change the key of an entry in place and return its value.

    Returns default when the old key is absent, so pass a sentinel to tell an
    absent key apart from a stored value of None. Raises KeyExistsError when
    the new key already belongs to another entry.
    """
    position = self._index.lookup(old)
    if position is None:
      return default
    other = self._index.lookup(new)
    if other is not None and other != position:
      raise KeyExistsError(
          f"Cannot rename '{old}' to '{new}' because '{new}' already exists "
          f'at position {other}.')
    _, value = self._store.read(position)
    if other == position:
      return value
    self._store.write(position, (new, value))
    self._index.remove(old)
    self._index.set(new, position)
    self._modified()
    return value

  def remove(self, key, default=None):
    entry = self.remove_entry(key)
    if entry is None:
      return default
    return entry[1]

  def remove_entry(self, key):
    position = self._index.lookup(key)
    if position is None:
      return None
    entry = self._delete(position)
    self._modified()
    return entry

  def swap_keys(self, a, b):
    i = self._index.lookup(a)
    j = self._index.lookup(b)
    if i is None or j is None:
      return False
    self.swap_indices(i, j)
    return True

  def swap_indices(self, i, j):
    self._store.swap(i, j)
    if i == j:
      # Nothing moved, the index is untouched.
      return
    self._index.set(self._store.read(i)[0], i)
    self._index.set(self._store.read(j)[0], j)
    self._modified()

  def pop(self):
    if not len(self._store):
      return None
    entry = self._store.pop()
    self._index.remove(entry[0])
    self._modified()
    return entry

  def clear(self):
    self._store.clear()
    self._index.clear()
    self._modified()

  def drain(self):
    """Empty the container and iterate over the entries it held."""
    entries = list(self._store)
    self.clear()
    return iter(entries)

  def validate(self):
    store, index = self._store, self._index
    assert len(index) == len(store), (len(index), len(store))
    for position, (key, _) in enumerate(store):
      assert index.lookup(key) == position, (key, position, index)
    for key, position in index.items():
      assert 0 <= position < len(store), (key, position, len(store))
      assert store.read(position)[0] == key, (key, position, store)

  def _delete(self, position):
    entry = self._store.remove(position)
    self._index.remove(entry[0])
    self._index.shift(position + 1, -1)
    return entry

  def _modified(self):
    self._version += 1
    if self._checked:
      self.validate()

  def _iterate(self, fn):
    return self._walk(fn, self._version)

  def _walk(self, fn, version):
    position = 0
    while True:
      if self._version != version:
        raise RuntimeError('HashVec was mutated during iteration.')
      if position >= len(self._store):
        return
      yield fn(self._store.read(position))
      position += 1


class ValueRef:
  """Handle to the value of one entry, returned by HashVec.get_mut()."""

  __slots__ = ('_container', '_key', '_version')

  def __init__(self, container, key):
    self._container = container
    self._key = key
    self._version = container._version

  def __repr__(self):
    if self._version != self._container._version:
      return f'ValueRef({self._key!r}, invalidated)'
    return f'ValueRef({self._key!r}, {self.value!r})'

  @property
  def key(self):
    return self._key

  @property
  def position(self):
    self._ensure()
    return self._container._index.lookup(self._key)

  @property
  def value(self):
    return self._container._store.read(self.position)[1]

  @value.setter
  def value(self, value):
    position = self.position
    stored, _ = self._container._store.read(position)
    self._container._store.write(position, (stored, value))

  def _ensure(self):
    if self._version != self._container._version:
      raise RuntimeError(
          f"Reference to key '{self._key}' was invalidated by a later "
          'mutation of the HashVec.')


def hashvec(*pairs, **kwargs):
  return HashVec(pairs, **kwargs)
