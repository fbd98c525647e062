# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tabl.attrs import AttrBag, split_tokens
from tabl.markup import Present
from tabl.table import Cell, Table
from utest import utest, utest_val


# Scalar values.
b = AttrBag()
utest(None, b.set, 'class', 'active')
utest('active', b.get, 'class')
utest(None, b.add, 'class', 'highlight')
utest('active highlight', b.get, 'class')
utest(None, b.add, 'class', 'active') # Already present.
utest('active highlight', b.get, 'class')
utest(None, b.add, 'class', 'first', prepend=True)
utest('first active highlight', b.get, 'class')
utest(None, b.remove, 'class', 'active')
utest('first highlight', b.get, 'class')
utest(None, b.remove, 'class', 'highlight first')
utest(False, b.has, 'class')
utest('dflt', b.get, 'class', 'dflt')

# Adding to an absent attribute is the same as setting it.
utest(None, b.add, 'id', 'main')
utest('main', b.get, 'id')
utest(None, b.add, 'colspan', 2)
utest(2, b.get, 'colspan')
utest(None, b.add, 'colspan', 3)
utest('2 3', b.get, 'colspan')

# Token lists.
l = AttrBag({'class': ['a']})
utest(None, l.add, 'class', 'b')
utest(['a', 'b'], l.get, 'class')
utest(None, l.add, 'class', 'a')
utest(['a', 'b'], l.get, 'class')
utest(None, l.add, 'class', ['z', 'y'], prepend=True)
utest(['z', 'y', 'a', 'b'], l.get, 'class')
utest(None, l.remove, 'class', 'a')
utest(['z', 'y', 'b'], l.get, 'class')
utest(None, l.remove, 'class', ['z', 'y', 'b'])
utest(False, l.has, 'class')

# Removal of unknown names and tokens is a no-op.
r = AttrBag({'class': 'x', 'id': 'y', 'title': 't'})
utest(None, r.remove, 'missing', 'x')
utest(None, r.remove, 'class', 'absent')
utest('x', r.get, 'class')
utest(None, r.remove, 'class', 'absent', purge=True)
utest(False, r.has, 'class')
utest(None, r.remove, 'id')
utest(False, r.has, 'id')
utest(None, r.clear, 'title')
utest(0, len, r)
utest(None, r.clear, 'title')

# Tuples are stored as tuples, and merging keeps the type.
tb = AttrBag()
tb.set('class', ('a', 'b'))
utest(('a', 'b'), tb.get, 'class')
tb.add('class', 'c')
utest(('a', 'b', 'c'), tb.get, 'class')
tb.remove('class', 'a')
utest(('b', 'c'), tb.get, 'class')
utest_val(True, AttrBag({'class': ('x',)}) == {'class': ('x',)}, 'tuple survives construction')

# Removing an absent token leaves the value untouched.
n = AttrBag({'colspan': 2, 'title': 'a  b', 'hidden': Present(True), 'draggable': True, 'class': ['p', 'q']})
for name in ['colspan', 'title', 'hidden', 'draggable', 'class']:
  n.remove(name, 'x')
utest(2, n.get, 'colspan')
utest('a  b', n.get, 'title')
utest(Present(True), n.get, 'hidden')
utest(True, n.get, 'draggable')
utest(['p', 'q'], n.get, 'class')

# Values that are not token sequences are only removed as a whole.
n.remove('colspan', '2')
utest(2, n.get, 'colspan')
n.remove('colspan', 2)
utest(False, n.has, 'colspan')
n.remove('hidden', Present(True))
utest(False, n.has, 'hidden')
n.remove('draggable', True)
utest(False, n.has, 'draggable')

# Adding to a flag value replaces it.
f = AttrBag({'hidden': Present(True), 'draggable': False})
f.add('hidden', 'x')
utest('x', f.get, 'hidden')
f.add('draggable', True)
utest(True, f.get, 'draggable')
utest(None, f.add, 'colspan', 2)
utest(None, f.add, 'colspan', 2) # Same token; the int is kept.
utest(2, f.get, 'colspan')

# Unmatched removal does not corrupt rendered flags.
t = Table()
t.set('hidden', Present(True))
t.remove('hidden', 'x')
utest("<table hidden=''></table>", t.render)
t.add('hidden', 'x')
utest("<table hidden='x'></table>", t.render)


# The initial mapping is copied.
src = {'class': ['a']}
c = AttrBag(src)
c.add('class', 'b')
utest_val(['a'], src['class'], 'source list is not mutated')
utest_val({'class': ['a', 'b']}, c, 'bag equals a dict')
utest_val(['class'], list(c), 'iteration yields names')

utest(['a', 'b', 'c'], split_tokens, ['a b', 'c'])
utest([], split_tokens, None)
utest(['true'], split_tokens, True)

# Node attribute API chains.
cell = Cell('x').set('class', 'a').add('class', 'b').prepend('class', 'z')
utest_val('z a b', cell.get('class'))
utest_val(True, cell.has('class'))
utest_val(False, cell.clear('class').has('class'))
utest_val({'a': 1, 'b': 2}, Cell().update_attrs({'a': 1}).update_attrs([('b', 2)]).attrs)
