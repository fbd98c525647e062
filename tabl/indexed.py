# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Generic, Iterator, Optional, TypeVar

from .exceptions import IndexNotFound, ReadOnlyViolation


_T = TypeVar('_T')


class ReadOnlyIndexed(Generic[_T]):
  '''
  Append-only collection addressed by integer index.

  Elements live in a sparse index table: deleting an index never shifts the elements after it,
  and appending always uses one past the highest index ever assigned.
  Lookup by a missing index raises `IndexNotFound`; assignment by index always raises `ReadOnlyViolation`.
  Iteration starts at index 0 and stops at the first absent index.
  '''

  __slots__ = () # Subclasses declare `_items` and `_next_index`.

  def __init__(self) -> None:
    self._items:dict[int,_T] = {}
    self._next_index = 0


  def _append(self, item:_T) -> _T:
    self._items[self._next_index] = item
    self._next_index += 1
    return item


  def __contains__(self, index:object) -> bool:
    return is_index(index) and index in self._items


  def __getitem__(self, index:int) -> _T:
    if not is_index(index): raise IndexNotFound(index)
    try: return self._items[index]
    except KeyError: raise IndexNotFound(index) from None


  def __setitem__(self, index:int, value:_T) -> None:
    raise ReadOnlyViolation(index)


  def __delitem__(self, index:int) -> None:
    if not is_index(index): return
    try: del self._items[index]
    except KeyError: pass


  def __iter__(self) -> Iterator[_T]:
    items = self._items
    i = 0
    while i in items:
      yield items[i]
      i += 1


  def __len__(self) -> int: return len(self._items)


  def indices(self) -> Iterator[int]:
    'Yield the present indices in ascending order.'
    return iter(sorted(self._items))


  @property
  def last(self) -> Optional[_T]:
    'The element at the highest present index, or None if the collection is empty.'
    items = self._items
    if not items: return None
    try: return items[self._next_index - 1] # Highest index unless it was deleted.
    except KeyError: return items[max(items)]


  def _present(self) -> Iterator[_T]:
    'Yield every present element in index order, including those after a gap.'
    items = self._items
    return (items[i] for i in sorted(items))


def is_index(index:object) -> bool:
  'Only true `int` values address elements; `bool` and integral floats do not.'
  return isinstance(index, int) and not isinstance(index, bool)
