import sys

from . import config as configlib


class Flags:
  """Reads --key value and --key=value arguments into a Config.

  Tuple keys take all values up to the next flag, or a single comma
  separated value. Config.update() converts the strings to the right types.
  """

  def __init__(self, *args, **kwargs):
    self._config = configlib.Config(*args, **kwargs)

  def parse(self, argv=None):
    parsed, remaining = self.parse_known(argv)
    unknown = [x for x in remaining if x.startswith('--')]
    if unknown:
      raise KeyError(f'Flags {unknown} did not match any config keys.')
    if remaining:
      raise ValueError(
          f'Could not parse all arguments. Remaining: {remaining}')
    return parsed

  def parse_known(self, argv=None):
    argv = sys.argv[1:] if argv is None else argv
    groups, remaining = [], []
    for arg in argv:
      if arg.startswith('--'):
        name, assign, value = arg[len('--'):].partition('=')
        groups.append((name, [value] if assign else []))
      elif groups:
        groups[-1][1].append(arg)
      else:
        remaining.append(arg)
    overrides = {}
    for name, values in groups:
      if name in self._config and values:
        overrides[name] = self._collect(name, values)
      else:
        remaining.extend(['--' + name] + values)
    return self._config.update(overrides), remaining

  def _collect(self, name, values):
    if isinstance(self._config[name], tuple):
      if len(values) == 1 and ',' in values[0]:
        values = values[0].split(',')
      return tuple(values)
    if len(values) != 1:
      raise TypeError(
          f"Expected a single value for key '{name}' but got: {values}")
    return values[0]
