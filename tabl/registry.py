# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Named table instances.
A `TableRegistry` caches tables by name and creates them on first request.
The module-level `default_registry` is created at import and lives for the process;
entries are only evicted when the caller discards them.
'''

from types import MappingProxyType
from typing import Iterator

from .attrs import AttrsArg
from .table import Table


default_name = '_default_'


class TableRegistry:

  def __init__(self) -> None:
    self._tables:dict[str,Table] = {}
    self.tables = MappingProxyType[str,Table](self._tables)


  def __repr__(self) -> str: return f'TableRegistry({list(self._tables)!r})'

  def __contains__(self, name:object) -> bool: return name in self._tables

  def __len__(self) -> int: return len(self._tables)

  def __iter__(self) -> Iterator[str]: return iter(self._tables)


  def instance(self, name:str=default_name, attrs:AttrsArg=None) -> Table:
    '''
    Return the table registered under `name`, or forge a new one with `attrs` and register it.
    `attrs` is ignored if the table already exists.
    '''
    try: return self._tables[name]
    except KeyError: pass
    table = self._tables[name] = Table.forge(attrs)
    return table


  def names(self) -> list[str]: return list(self._tables)


  def discard(self, name:str) -> None:
    'Remove the table registered under `name` if it exists.'
    try: del self._tables[name]
    except KeyError: pass


default_registry = TableRegistry()


def instance(name:str=default_name, attrs:AttrsArg=None) -> Table:
  'Return the named table from `default_registry`, creating it on first request.'
  return default_registry.instance(name, attrs)
