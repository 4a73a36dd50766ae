import re

import colored

from . import container


TOKENS = (
    ('position', re.compile(r'\[[0-9]+\]'), 'cyan'),
    ('string', re.compile(r"'[^']*'|\"[^\"]*\""), 'red'),
    ('keyword', re.compile(r'\b(?:True|False|None)\b'), 'blue'),
    ('number', re.compile(
        r'(?<![\w.])[-+]?[0-9]+(?:\.[0-9]+)?(?:e[-+]?[0-9]+)?'), 'blue'),
    ('punct', re.compile(r'[{}()<>,:]'), 'white'),
)
PATTERN = re.compile('|'.join(
    f'(?P<{name}>{regex.pattern})' for name, regex, _ in TOKENS))
COLORS = {name: color for name, _, color in TOKENS}


def print_(*values, color=True, **kwargs):
  value = kwargs.pop('sep', ' ').join(str(x) for x in values)
  assert isinstance(color, (bool, str)), color
  if isinstance(color, str):
    value = colored.stylize(value, colored.fg(color))
  elif color:
    value = highlight(value)
  print(value, **kwargs)


def highlight(text):
  reset = colored.attr('reset')
  def fn(match):
    return colored.fg(COLORS[match.lastgroup]) + match.group(0) + reset
  return PATTERN.sub(fn, text)


def format_(value):
  if isinstance(value, container.HashVec):
    items = [f'{_quote(k)}: {_quote(v)}' for k, v in value]
    return f'HashVec<{len(value)}>' + '{' + ', '.join(items) + '}'
  if isinstance(value, dict):
    items = [f'{_quote(k)}: {_quote(v)}' for k, v in value.items()]
    return '{' + ', '.join(items) + '}'
  if isinstance(value, list):
    return '[' + ', '.join(_quote(x) for x in value) + ']'
  if isinstance(value, tuple):
    return '(' + ', '.join(_quote(x) for x in value) + ')'
  if isinstance(value, bytes):
    value = '0x' + value.hex() if r'\x' in str(value) else str(value)
    if len(value) > 32:
      value = value[:32 - 3] + '...'
  return str(value)


def table(hashvec):
  """One line per entry, prefixed with its position."""
  width = len(str(max(len(hashvec) - 1, 0)))
  lines = []
  for position, (key, value) in enumerate(hashvec):
    lines.append(f'  [{position}]'.ljust(width + 6) + (
        f'{_quote(key)}: {_quote(value)}'))
  return '\n'.join(lines)


def _quote(value):
  if isinstance(value, str):
    return repr(value)
  return format_(value)
