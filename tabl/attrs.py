# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute storage for table nodes.

An `AttrBag` is an ordered mapping from attribute names to values.
Values are either scalars or token lists (lists of strings, conventionally used for `class`).
`add` and `remove` treat both token lists and scalar strings as sequences of space-separated tokens,
so that adding a class twice never duplicates it.
'''

from typing import Any, Iterable, Iterator, Mapping, Optional, Self


AttrsArg = Optional[Mapping[str,Any]]


class AttrBag(Mapping[str,Any]):
  '''
  Ordered attribute mapping with replace, append and prepend merge policies.
  All operations are total: unknown names are ignored by `remove` and `clear`, and `get` returns the default.
  '''

  __slots__ = ('_attrs',)

  def __init__(self, attrs:AttrsArg=None) -> None:
    self._attrs:dict[str,Any] = {}
    if attrs:
      for k, v in attrs.items(): self.set(k, v)


  def __repr__(self) -> str: return f'{type(self).__name__}({self._attrs!r})'

  def __getitem__(self, name:str) -> Any: return self._attrs[name]

  def __iter__(self) -> Iterator[str]: return iter(self._attrs)

  def __len__(self) -> int: return len(self._attrs)

  def __eq__(self, other:Any) -> bool:
    if isinstance(other, AttrBag): return self._attrs == other._attrs
    if isinstance(other, Mapping): return self._attrs == dict(other)
    return NotImplemented


  def has(self, name:str) -> bool: return name in self._attrs


  def copy(self) -> 'AttrBag': return AttrBag(self._attrs)


  def set(self, name:str, value:Any) -> None:
    'Replace the value of `name` unconditionally. Token lists and tuples are stored as copies of the same type.'
    if isinstance(value, list): value = list(value)
    elif isinstance(value, tuple): value = tuple(value)
    self._attrs[name] = value


  def add(self, name:str, value:Any, prepend=False) -> None:
    '''
    Merge `value` into the attribute.
    If `name` is absent this is the same as `set`.
    Otherwise each token of `value` that is not already present is inserted at the end, or at the start if `prepend` is true.
    Lists and tuples keep their type; strings and numbers become space-joined strings.
    Flag values (`None`, `bool`, `Present`) have no tokens to merge with and are replaced by `value`.
    '''
    try: existing = self._attrs[name]
    except KeyError:
      self.set(name, value)
      return
    if not is_tokenized(existing) and not is_number(existing):
      self.set(name, value)
      return
    tokens = split_tokens(existing)
    new_tokens = [t for t in dict.fromkeys(split_tokens(value)) if t not in tokens]
    if not new_tokens: return
    merged = (new_tokens + tokens) if prepend else (tokens + new_tokens)
    self._attrs[name] = join_tokens(existing, merged)


  def remove(self, name:str, value:Any=None, purge=False) -> None:
    '''
    Remove the tokens of `value` from the attribute, deleting the attribute if nothing remains.
    If `purge` is true or `value` is None, delete the attribute outright.
    Values that are not strings, lists or tuples are removed only when `value` equals the whole value.
    An attribute that contains none of the tokens is left untouched.
    '''
    if name not in self._attrs: return
    if purge or value is None:
      del self._attrs[name]
      return
    existing = self._attrs[name]
    if not is_tokenized(existing):
      if value == existing: del self._attrs[name]
      return
    doomed = set(split_tokens(value))
    tokens = split_tokens(existing)
    remaining = [t for t in tokens if t not in doomed]
    if len(remaining) == len(tokens): return
    if not remaining:
      del self._attrs[name]
    else:
      self._attrs[name] = join_tokens(existing, remaining)


  def clear(self, name:str) -> None:
    'Delete the attribute entirely.'
    self.remove(name, purge=True)


def is_tokenized(value:Any) -> bool:
  'True for values that `add` and `remove` treat as sequences of tokens: strings, lists and tuples.'
  return isinstance(value, (str, list, tuple))


def is_number(value:Any) -> bool:
  return isinstance(value, (int, float)) and not isinstance(value, bool)


def join_tokens(existing:Any, tokens:list[str]) -> Any:
  'Rebuild a merged value with the same container type as `existing`.'
  if isinstance(existing, list): return tokens
  if isinstance(existing, tuple): return tuple(tokens)
  return ' '.join(tokens)


def split_tokens(value:Any) -> list[str]:
  'Split a scalar or token list value into its individual tokens.'
  if value is None: return []
  if isinstance(value, (list, tuple)):
    return [t for v in value for t in split_tokens(v)]
  if isinstance(value, bool): value = str(value).lower()
  return str(value).split()


class Attributed:
  '''
  Base class for nodes that own an `AttrBag`.
  Mutators return the node so that calls can be chained.
  '''

  __slots__ = () # Subclasses declare `_attrs`.

  def __init__(self, attrs:AttrsArg=None) -> None:
    self._attrs = AttrBag(attrs)

  @property
  def attrs(self) -> AttrBag: return self._attrs


  def get(self, key:str, default:Any=None) -> Any:
    return self._attrs.get(key, default)

  def has(self, key:str) -> bool: return self._attrs.has(key)


  def set(self, key:str, value:Any) -> Self:
    self._attrs.set(key, value)
    return self


  def add(self, key:str, value:Any, prepend=False) -> Self:
    self._attrs.add(key, value, prepend=prepend)
    return self


  def prepend(self, key:str, value:Any) -> Self:
    return self.add(key, value, prepend=True)


  def remove(self, key:str, value:Any=None, purge=False) -> Self:
    self._attrs.remove(key, value, purge=purge)
    return self


  def clear(self, key:str) -> Self:
    self._attrs.clear(key)
    return self


  def update_attrs(self, attrs:Mapping[str,Any]|Iterable[tuple[str,Any]]) -> Self:
    'Set each attribute of `attrs`.'
    items = attrs.items() if isinstance(attrs, Mapping) else attrs
    for k, v in items:
      self._attrs.set(k, v)
    return self
