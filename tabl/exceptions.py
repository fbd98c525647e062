# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by table nodes.
Each is initialized like the builtin it subclasses, with the offending index or name as the sole argument,
so that instances compare by type and `args`.
'''

from typing import Any


class IndexNotFound(IndexError):
  'Raised when an index is absent from a read-only indexed collection.'

  def __init__(self, index:Any) -> None:
    self.index = index
    super().__init__(index)

  def __str__(self) -> str: return f'Access to undefined index [{self.index}]'


class ReadOnlyViolation(TypeError):
  'Raised on any assignment by index; rows and cells are only added through the `add_*` methods.'

  def __init__(self, index:Any) -> None:
    self.index = index
    super().__init__(index)

  def __str__(self) -> str: return f'Cannot set index [{self.index}]: elements are read-only'


class UnknownMethod(AttributeError):
  '''
  Raised when an addressing shorthand cannot be resolved, e.g. `row_x`.
  Since it arises from attribute-style access, it subclasses AttributeError.
  '''

  def __init__(self, name:str) -> None:
    super().__init__(name)
    self.name = name

  def __str__(self) -> str: return f'Cannot resolve shorthand: {self.name!r}'
