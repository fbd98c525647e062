# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The table tree: `Table` owns up to one head, body and foot `Section`; each section owns `Row`s; each row owns `Cell`s.

Sections are a single type parameterized by a `SectionKind`, which fixes the wrapping tag and the tag of the cells
in its rows. Children are created lazily: `table.head` creates the head on first access,
and `section.add_cell` creates the first row when the section is empty.

Rows, sections and tables also support shorthand addressing through `get`:
`'head'`, `'foot'` and `'body'` name sections, `'row_N'` names the row at index N, and `'row'` names the last row
(or the row at index `default`). Any other key is an attribute lookup.
'''

import re
from typing import Any, Iterable, Iterator, Mapping, NamedTuple, Optional, Self, Union

from .attrs import Attributed, AttrsArg
from .exceptions import IndexNotFound, ReadOnlyViolation, UnknownMethod
from .indexed import ReadOnlyIndexed
from .markup import render_content, render_tag


class SectionKind(NamedTuple):
  name:str
  tag:str
  cell_tag:str


HEAD = SectionKind('head', 'thead', 'th')
BODY = SectionKind('body', 'tbody', 'td')
FOOT = SectionKind('foot', 'tfoot', 'td')

# Either a sequence of cell values, or a mapping from cell values to cell attributes.
CellValues = Union[Iterable[Any],Mapping[Any,Mapping[str,Any]]]


class Cell(Attributed):
  'A single content-bearing leaf. `value` is the inner content and is not an attribute.'

  __slots__ = ('_attrs', 'value')

  def __init__(self, value:Any='', attrs:AttrsArg=None) -> None:
    super().__init__(attrs)
    self.value = value

  def __repr__(self) -> str: return f'Cell({self.value!r}, {dict(self.attrs)!r})'

  def render(self, tag:str=BODY.cell_tag) -> str:
    return render_tag(tag, self._attrs, render_content(self.value))


class Row(Attributed, ReadOnlyIndexed[Cell]):
  'An ordered sequence of cells, rendered as a `tr` whose cells use the cell tag of its section kind.'

  __slots__ = ('_attrs', '_items', '_next_index', 'kind')

  def __init__(self, kind:SectionKind=BODY, values:CellValues=(), attrs:AttrsArg=None) -> None:
    Attributed.__init__(self, attrs)
    ReadOnlyIndexed.__init__(self)
    self.kind = kind
    self.add_cells(values)


  def __repr__(self) -> str: return f'Row({self.kind.name!r}, cells={len(self)})'

  def __str__(self) -> str: return self.render()


  @property
  def cell_tag(self) -> str: return self.kind.cell_tag


  def add_cell(self, value:Any='', attrs:AttrsArg=None) -> Cell:
    'Append a new cell and return it.'
    return self._append(Cell(value, attrs))


  def add_cells(self, values:CellValues) -> Self:
    '''
    Append a cell for each element of `values`.
    If `values` is a mapping, its keys are the cell values and its values are the cell attributes.
    '''
    if isinstance(values, Mapping):
      for value, attrs in values.items():
        self.add_cell(value, attrs)
    else:
      for value in values:
        self.add_cell(value)
    return self


  def render(self) -> str:
    tag = self.kind.cell_tag
    return render_tag('tr', self._attrs, ''.join(cell.render(tag) for cell in self._present()))


class Section(Attributed, ReadOnlyIndexed[Row]):
  '''
  A head, body or foot: an ordered sequence of rows wrapped in the tag of its `kind`.
  Rows are only ever appended; `del section[i]` removes a row without renumbering the others.
  '''

  __slots__ = ('_attrs', '_items', '_next_index', 'kind')

  def __init__(self, kind:SectionKind=BODY, columns:CellValues=(), attrs:AttrsArg=None) -> None:
    Attributed.__init__(self, attrs)
    ReadOnlyIndexed.__init__(self)
    self.kind = kind
    if columns: self.add_cells(columns)


  @classmethod
  def forge(cls, kind:SectionKind=BODY, columns:CellValues=(), attrs:AttrsArg=None) -> 'Section':
    return cls(kind, columns, attrs)


  def __repr__(self) -> str: return f'Section({self.kind.name!r}, rows={len(self)})'

  def __str__(self) -> str: return self.render()

  def __getattr__(self, name:str) -> Row:
    '''
    Resolve `row_N` attribute access to the row at index N.
    A missing row raises IndexNotFound, which is not an AttributeError,
    so `hasattr` and three-argument `getattr` propagate it rather than reporting absence; use `N in node` to test.
    '''
    if name.startswith('row_'): return self.get(name)
    raise AttributeError(name)


  def get(self, key:str, default:Any=None) -> Any:
    '''
    Get a row by shorthand or else an attribute.
    `'row_N'` returns the row at index N; `'row'` returns the row at index `default`, or the last row if `default` is None.
    '''
    index = shorthand_row_index(key, default, len(self))
    if index is not None: return self[index]
    return self._attrs.get(key, default)


  @property
  def row(self) -> Row:
    'The last row; raises IndexNotFound if the section is empty.'
    return self.get('row')


  def add_row(self, values:CellValues=(), attrs:AttrsArg=None) -> Row:
    'Append a new row of this section\'s kind, populated from `values`, and return it.'
    return self._append(Row(self.kind, values, attrs))


  def add_cell(self, value:Any='', attrs:AttrsArg=None) -> Cell:
    'Append a cell to the last row, creating the first row if the section is empty.'
    row = self.last
    if row is None: row = self.add_row()
    return row.add_cell(value, attrs)


  def add_cells(self, values:CellValues) -> Self:
    'Append cells to the last row, creating the first row if the section is empty.'
    if isinstance(values, Mapping):
      for value, attrs in values.items():
        self.add_cell(value, attrs)
    else:
      for value in values:
        self.add_cell(value)
    return self


  def render(self) -> str:
    return render_tag(self.kind.tag, self._attrs, '\n'.join(row.render() for row in self._present()))


class Table(Attributed):
  '''
  The root of the tree. Holds at most one section of each kind.

  The `head`, `foot` and `body` properties create their section on first access;
  `add_head`, `add_foot` and `add_body` always create a new one, replacing any existing section of that kind.

  Indexing, iteration and `len` apply to the rows of the body.
  A table without a body behaves as empty, and none of these operations create it.
  '''

  __slots__ = ('_attrs', '_head', '_body', '_foot')

  def __init__(self, attrs:AttrsArg=None) -> None:
    super().__init__(attrs)
    self._head:Optional[Section] = None
    self._body:Optional[Section] = None
    self._foot:Optional[Section] = None


  @classmethod
  def forge(cls, attrs:AttrsArg=None) -> 'Table':
    return cls(attrs)


  def __repr__(self) -> str:
    sections = ' '.join(s.kind.name for s in (self._head, self._foot, self._body) if s is not None)
    return f'<Table: {sections}>' if sections else '<Table>'

  def __str__(self) -> str: return self.render()

  def __getattr__(self, name:str) -> Row:
    'Resolve `row_N` as `Section.__getattr__` does, against the body rows.'
    if name.startswith('row_'): return self.get(name)
    raise AttributeError(name)


  # Sections.

  def add_head(self, attrs:AttrsArg=None) -> Section:
    self._head = Section(HEAD, attrs=attrs)
    return self._head

  def add_foot(self, attrs:AttrsArg=None) -> Section:
    self._foot = Section(FOOT, attrs=attrs)
    return self._foot

  def add_body(self, attrs:AttrsArg=None) -> Section:
    self._body = Section(BODY, attrs=attrs)
    return self._body


  @property
  def head(self) -> Section:
    if self._head is None: return self.add_head()
    return self._head

  @property
  def foot(self) -> Section:
    if self._foot is None: return self.add_foot()
    return self._foot

  @property
  def body(self) -> Section:
    if self._body is None: return self.add_body()
    return self._body

  @property
  def has_head(self) -> bool: return self._head is not None

  @property
  def has_foot(self) -> bool: return self._foot is not None

  @property
  def has_body(self) -> bool: return self._body is not None


  def add_row(self, values:CellValues=(), attrs:AttrsArg=None) -> Section:
    '''
    Append a row to the body, creating the body if necessary.
    Note that this returns the body, not the new row; use `table.row` or `table.body.add_row` to get the row.
    '''
    body = self.body
    body.add_row(values, attrs)
    return body


  # Shorthand addressing and attributes.

  def get(self, key:str, default:Any=None) -> Any:
    '''
    Get a section, a body row, or an attribute.
    `'head'`, `'foot'` and `'body'` return the section, creating it if absent.
    `'row_N'` and `'row'` address body rows as in `Section.get`.
    Any other key returns the attribute value or `default`.
    '''
    if key == 'head': return self.head
    if key == 'foot': return self.foot
    if key == 'body': return self.body
    index = shorthand_row_index(key, default, len(self))
    if index is not None: return self[index]
    return self._attrs.get(key, default)


  @property
  def row(self) -> Row:
    'The last body row; raises IndexNotFound if there is none.'
    return self.get('row')


  def set(self, key:str, value:Any, append=False) -> Self:
    'Set an attribute, or merge `value` into it if `append` is true.'
    if append: self._attrs.add(key, value)
    else: self._attrs.set(key, value)
    return self


  # Body row access.

  def __contains__(self, index:object) -> bool:
    return self._body is not None and index in self._body

  def __getitem__(self, index:int) -> Row:
    if self._body is None: raise IndexNotFound(index)
    return self._body[index]

  def __setitem__(self, index:int, value:Row) -> None:
    raise ReadOnlyViolation(index)

  def __delitem__(self, index:int) -> None:
    if self._body is not None: del self._body[index]

  def __iter__(self) -> Iterator[Row]:
    if self._body is None: return iter(())
    return iter(self._body)

  def __len__(self) -> int:
    return 0 if self._body is None else len(self._body)


  # Rendering.

  def render(self) -> str:
    '''
    Render the table: head, foot, then body, each on its own line.
    The foot precedes the body regardless of creation order.
    If rendering fails, return the error message instead of raising.
    '''
    try:
      sections = '\n'.join(s.render() for s in (self._head, self._foot, self._body) if s is not None)
      return render_tag('table', self._attrs, sections)
    except Exception as e:
      return str(e)


def shorthand_row_index(key:str, default:Any, count:int) -> Optional[int]:
  '''
  Resolve a row shorthand to an index, or return None if `key` is not a row shorthand.
  `'row_N'` resolves to N; `'row'` resolves to `default` if given, else to the last index (`count - 1`).
  Raises UnknownMethod for malformed shorthands such as `'row_x'`.
  '''
  if key == 'row': return count - 1 if default is None else default
  if not key.startswith('row_'): return None
  m = _row_n_re.fullmatch(key)
  if m is None: raise UnknownMethod(key)
  return int(m['index'])


_row_n_re = re.compile(r'row_(?P<index>\d+)')
