# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tabl` builds HTML tables as mutable trees of sections, rows and cells, and renders them to markup.
'''

from .__about__ import __version__
from .attrs import AttrBag, Attributed
from .exceptions import IndexNotFound, ReadOnlyViolation, UnknownMethod
from .indexed import ReadOnlyIndexed
from .markup import EscapedStr, Present, render_tag
from .registry import default_registry, instance, TableRegistry
from .table import BODY, Cell, FOOT, HEAD, Row, Section, SectionKind, Table
