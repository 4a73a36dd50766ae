import pathlib
import sys

folder = pathlib.Path(__file__).parent
sys.path.insert(0, str(folder.parent))
__package__ = folder.name

import ruamel.yaml as yaml

from . import container
from . import printing
from .config import Config
from .flags import Flags


def main(argv=None):
  configs = yaml.YAML(typ='safe').load((folder / 'configs.yaml').read_text())
  parsed, other = Flags(configs=['defaults']).parse_known(argv)
  config = Config(configs['defaults'])
  for name in parsed.configs:
    config = config.update(configs[name])
  config = Flags(config).parse(other)

  hashvec = build(config)
  printing.print_(f'Loaded {len(hashvec)} entries ({config.mode}).',
                  color=config.color)
  for op in config.ops:
    printing.print_(apply(hashvec, op), color=config.color)
  return hashvec


def build(config):
  pairs = [parse_pair(x) for x in config.pairs]
  hashvec = container.HashVec(check=config.check)
  if config.mode == 'push':
    hashvec.extend(pairs)
  elif config.mode == 'insert':
    for key, value in pairs:
      hashvec.insert(key, value)
  else:
    raise ValueError(f"Unknown mode '{config.mode}', use push or insert.")
  return hashvec


def apply(hashvec, op):
  name, _, arg = op.partition(':')
  if name == 'insert':
    key, value = parse_pair(arg)
    hashvec.insert(key, value)
    return f"insert '{key}': '{value}' at [{hashvec.index(key)}]"
  if name == 'push':
    key, value = parse_pair(arg)
    hashvec.push((key, value))
    return f"push '{key}': '{value}' at [{hashvec.index(key)}]"
  if name == 'rename':
    old, new = parse_pair(arg)
    if old not in hashvec:
      return f"rename '{old}': missing"
    hashvec.rename(old, new)
    return f"rename '{old}' to '{new}' at [{hashvec.index(new)}]"
  if name == 'remove':
    if arg not in hashvec:
      return f"remove '{arg}': missing"
    value = hashvec.remove(arg)
    return f"remove '{arg}': '{value}'"
  if name == 'get':
    if arg not in hashvec:
      return f"get '{arg}': missing"
    return f"get '{arg}': '{hashvec.get(arg)}' at [{hashvec.index(arg)}]"
  if name == 'index':
    return f"index '{arg}': {hashvec.index(arg)}"
  if name == 'swap_keys':
    a, b = parse_pair(arg)
    if not hashvec.swap_keys(a, b):
      return f"swap_keys '{a}' '{b}': missing"
    return f"swap_keys '{a}' to [{hashvec.index(a)}], '{b}' to " + (
        f'[{hashvec.index(b)}]')
  if name == 'swap_indices':
    i, j = (int(x) for x in parse_pair(arg))
    hashvec.swap_indices(i, j)
    return f'swap_indices [{i}] [{j}]'
  if name == 'pop':
    entry = hashvec.pop()
    if entry is None:
      return 'pop: empty'
    return f"pop '{entry[0]}': '{entry[1]}'"
  if name == 'clear':
    hashvec.clear()
    return 'clear'
  if name == 'show':
    lines = [f'HashVec with {len(hashvec)} entries:']
    if len(hashvec):
      lines.append(printing.table(hashvec))
    return '\n'.join(lines)
  raise ValueError(f"Unknown op '{op}'.")


def parse_pair(text):
  if '=' not in text:
    raise ValueError(f"Expected 'key=value' but got '{text}'.")
  key, value = text.split('=', 1)
  return key, value


if __name__ == '__main__':
  main()
