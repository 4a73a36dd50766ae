import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).parent.parent.parent))

import hashvec
import numpy as np
import pytest


OPS = (
    'insert', 'push', 'insert_at', 'rename', 'remove', 'swap_keys',
    'swap_indices', 'pop', 'clear')


def reference_apply(pairs, op, args):
  """Apply an operation to a plain list of pairs."""
  keys = [k for k, _ in pairs]
  if op == 'insert':
    key, value = args
    if key in keys:
      pairs[keys.index(key)] = (key, value)
    else:
      pairs.append((key, value))
  elif op == 'push':
    key, value = args
    if key in keys:
      del pairs[keys.index(key)]
    pairs.append((key, value))
  elif op == 'insert_at':
    position, key, value = args
    if key in keys:
      del pairs[keys.index(key)]
    pairs.insert(position, (key, value))
  elif op == 'rename':
    old, new = args
    if old in keys:
      pairs[keys.index(old)] = (new, pairs[keys.index(old)][1])
  elif op == 'remove':
    if args[0] in keys:
      del pairs[keys.index(args[0])]
  elif op == 'swap_keys':
    a, b = args
    if a in keys and b in keys:
      i, j = keys.index(a), keys.index(b)
      pairs[i], pairs[j] = pairs[j], pairs[i]
  elif op == 'swap_indices':
    i, j = args
    pairs[i], pairs[j] = pairs[j], pairs[i]
  elif op == 'pop':
    pairs and pairs.pop()
  elif op == 'clear':
    pairs.clear()


def random_args(rng, hv, op):
  key = lambda: int(rng.integers(0, 12))
  if op in ('insert', 'push'):
    return (key(), int(rng.integers(0, 100)))
  if op == 'insert_at':
    k = key()
    limit = len(hv) - (k in hv)
    return (int(rng.integers(0, limit + 1)), k, int(rng.integers(0, 100)))
  if op == 'rename':
    return (key(), key())
  if op == 'remove':
    return (key(),)
  if op == 'swap_keys':
    return (key(), key())
  if op == 'swap_indices':
    return tuple(int(x) for x in rng.integers(0, len(hv), 2))
  return ()


def apply(hv, op, args):
  if op == 'push':
    hv.push(args)
  else:
    getattr(hv, op)(*args)


class TestProperties:

  @pytest.mark.parametrize('seed', range(10))
  def test_random_ops_match_reference(self, seed):
    rng = np.random.default_rng(seed)
    hv = hashvec.HashVec(check=True)
    pairs = []
    for _ in range(300):
      op = OPS[rng.choice(len(OPS), p=[.2, .2, .1, .1, .1, .1, .1, .08, .02])]
      if op == 'swap_indices' and not len(hv):
        continue
      args = random_args(rng, hv, op)
      if op == 'rename' and args[1] in hv and hv.index(args[1]) != hv.index(
          args[0]) and args[0] in hv:
        with pytest.raises(hashvec.KeyExistsError):
          hv.rename(*args)
      else:
        apply(hv, op, args)
        reference_apply(pairs, op, args)
      hv.validate()
      assert list(hv) == pairs
      assert len({k for k, _ in hv}) == len(hv)

  @pytest.mark.parametrize('seed', range(5))
  def test_push_moves_to_end(self, seed):
    rng = np.random.default_rng(seed)
    hv = hashvec.HashVec((int(k), 0) for k in rng.permutation(20))
    for key in rng.integers(0, 20, 10):
      key = int(key)
      hv.push((key, 1))
      assert hv.index(key) == len(hv) - 1
      assert len(hv) == 20

  @pytest.mark.parametrize('seed', range(5))
  def test_insert_preserves_position(self, seed):
    rng = np.random.default_rng(seed)
    hv = hashvec.HashVec((int(k), 0) for k in rng.permutation(20))
    for key in rng.integers(0, 20, 10):
      key = int(key)
      before = hv.index(key)
      hv.insert(key, 1)
      assert hv.index(key) == before
      assert hv.get(key) == 1

  @pytest.mark.parametrize('size', [2, 3, 10])
  def test_swap_is_self_inverse(self, size):
    hv = hashvec.HashVec(((k, k * k) for k in range(size)), check=True)
    original = list(hv)
    for i in range(size):
      for j in range(size):
        if i == j:
          continue
        hv.swap_indices(i, j)
        assert list(hv) != original
        hv.swap_indices(i, j)
        assert list(hv) == original

  @pytest.mark.parametrize('size', [0, 1, 10])
  def test_push_pop_round_trip(self, size):
    hv = hashvec.HashVec(((k, str(k)) for k in range(size)), check=True)
    original = list(hv)
    hv.push(('new', 'value'))
    assert hv.pop() == ('new', 'value')
    assert list(hv) == original

  @pytest.mark.parametrize('seed', range(5))
  def test_remove_then_absent(self, seed):
    rng = np.random.default_rng(seed)
    hv = hashvec.HashVec(((k, k) for k in range(30)), check=True)
    for key in rng.permutation(30)[:15]:
      key = int(key)
      length = len(hv)
      assert hv.remove(key) == key
      assert hv.get(key) is None
      assert len(hv) == length - 1
    assert list(hv.keys()) == sorted(hv.keys())

  @pytest.mark.parametrize('seed', range(5))
  def test_rename_preserves_position_and_value(self, seed):
    rng = np.random.default_rng(seed)
    hv = hashvec.HashVec(((k, -k) for k in range(10)), check=True)
    for old in rng.permutation(10):
      old = int(old)
      position = hv.index(old)
      assert hv.rename(old, f'key{old}') == -old
      assert hv.index(f'key{old}') == position
      assert hv.get(f'key{old}') == -old
      assert hv.get(old) is None
