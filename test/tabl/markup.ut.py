# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tabl.markup import EscapedStr, Present, fmt_attrs, prefer_int, render_content, render_tag
from utest import utest, utest_exc


utest('<td></td>', render_tag, 'td')
utest('<td>a</td>', render_tag, 'td', {}, 'a')
utest('<td><b>x</b></td>', render_tag, 'td', {}, '<b>x</b>') # Content is already rendered.

# id and class come first; other attributes keep their insertion order.
utest("<table id='t' class='c' border='1' summary='s'></table>", render_tag, 'table',
  {'border': 1, 'class': 'c', 'summary': 's', 'id': 't'})

utest("<tr class='a b'></tr>", render_tag, 'tr', {'class': ['a', 'b']})
utest('<tr></tr>', render_tag, 'tr', {'class': []})
utest("<tr class='a'></tr>", render_tag, 'tr', [('class', 'a')])

utest(" hidden=''", fmt_attrs, [('hidden', Present(True))])
utest('', fmt_attrs, [('hidden', Present(False))])
utest(" a='true' b='false' c='none'", fmt_attrs, [('a', True), ('b', False), ('c', None)])
utest(" colspan='2' width='2.5'", fmt_attrs, [('colspan', 2.0), ('width', 2.5)])

utest(''' title="it's"''', fmt_attrs, [('title', "it's")])
utest(''' title="a&quot;b'c"''', fmt_attrs, [('title', 'a"b\'c')])
utest(" title='a&amp;b&lt;c>d'", fmt_attrs, [('title', 'a&b<c>d')])

utest_exc(TypeError, render_tag, 'td', {'data': {'k': 1}})
utest_exc(TypeError, render_tag, 'td', {'class': ['a', 1]})

utest('a&lt;b &amp; c', render_content, 'a<b & c')
utest('<b>x</b>', render_content, EscapedStr('<b>x</b>'))
utest('', render_content, None)
utest('3', render_content, 3.0)
utest('3.5', render_content, 3.5)
utest_exc(TypeError, render_content, object())

utest(1, prefer_int, 1.0)
utest(1.5, prefer_int, 1.5)
utest('1.0', prefer_int, '1.0')
