# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides `render_tag`, the low-level serializer that turns a tag name, an attribute mapping and
already-rendered inner content into a markup string.
'''

from typing import Any, Iterable, Mapping, overload, Tuple, Union


class Present:
  '''
  The Present class is used to only set an attribute key if `is_present` evaluates to True.
  If an attribute has a `Present(True)` value, then the markup output will have an empty value set.
  https://html.spec.whatwg.org/multipage/syntax.html#attributes-2.
  For attributes that are unconditionally set, just use `key=''`.
  '''
  def __init__(self, is_present:Any):
    self.is_present = bool(is_present)

  def __repr__(self) -> str: return f'Present({self.is_present})'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Present) and self.is_present == other.is_present

  def __hash__(self) -> int: return hash((Present, self.is_present))


class EscapedStr:
  'A `str` wrapper class that signifies that the content has already been properly escaped.'

  def __init__(self, string:str):
    self.string = string

  def __repr__(self) -> str: return f'EscapedStr({self.string!r})'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, EscapedStr) and self.string == other.string

  def __hash__(self) -> int: return hash((EscapedStr, self.string))


AttrVal = Union[str,int,float,bool,None,Present,list[str]]
AttrItem = Tuple[str,Any]

attr_sort_ranks = {
  'id': -2,
  'class': -1,
}


def esc_text(text:str) -> str:
  text = text.replace("&", "&amp;") # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace("<", "&lt;")
  # Note: we do not replace ">" because it is not required and helpful to leave unescaped for embedded CSS.
  return text


def quote_attr_val(text:str) -> str:
  text = text.replace("&", "&amp;")
  text = text.replace("<", "&lt;")
  if "'" in text:
    text = text.replace('"', "&quot;")
    return f'"{text}"'
  else:
    return f"'{text}'"


def fmt_attr_val(key:str, v:Any) -> str|None:
  'Format a single attribute value, or return None if the attribute should be omitted.'
  if v is None or isinstance(v, bool): return str(v).lower()
  if isinstance(v, Present): return '' if v.is_present else None
  if isinstance(v, str): return v
  if isinstance(v, (int, float)): return str(prefer_int(v))
  if isinstance(v, (list, tuple)):
    for token in v:
      if not isinstance(token, str): raise TypeError(f'invalid token for attribute {key!r}: {token!r}')
    return ' '.join(v) or None
  raise TypeError(f'invalid value for attribute {key!r}: {v!r}')


def fmt_attrs(items:Iterable[AttrItem]) -> str:
  'Return a string that is either empty or with a leading space, containing all of the formatted items.'
  parts:list[str] = []
  for k, v in sorted(items, key=lambda item: attr_sort_ranks.get(item[0], 0)):
    s = fmt_attr_val(k, v)
    if s is None: continue
    parts.append(f' {k}={quote_attr_val(s)}')
  return ''.join(parts)


def render_content(value:Any) -> str:
  'Render a cell value as inner content. Text is escaped; `EscapedStr` is passed through verbatim.'
  if value is None: return ''
  if isinstance(value, str): return esc_text(value)
  if isinstance(value, EscapedStr): return value.string
  if isinstance(value, bool): return str(value).lower()
  if isinstance(value, (int, float)): return str(prefer_int(value))
  raise TypeError(f'invalid content: {value!r}')


def render_tag(tag:str, attrs:Mapping[str,Any]|Iterable[AttrItem]=(), content:str='') -> str:
  '''
  Render a single element.
  `content` is already rendered markup and is emitted verbatim.
  '''
  items = attrs.items() if isinstance(attrs, Mapping) else attrs
  return f'<{tag}{fmt_attrs(items)}>{content}</{tag}>'


@overload
def prefer_int(v:int) -> int: ...
@overload
def prefer_int(v:float) -> Union[int,float]: ...
@overload
def prefer_int(v:str) -> str: ...

def prefer_int(v:Union[float,int,str]) -> Union[float,int,str]:
  'Convert integral floats to int.'
  if isinstance(v, float):
    i = int(v)
    return i if i == v else v
  return v
