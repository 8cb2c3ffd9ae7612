"""
Convenience constructors for building documents programmatically

    html([head([title([data("Hi")])]), body([p([data("text")], a=[("class", "lead")])])])
"""

from functools import partial
from typing import Sequence, Tuple

from .node import Element, Node, Text


def item(tag: str, children: Sequence[Node] = (), a: Sequence[Tuple[str, str]] = ()) -> Element:
    """Build an element; a is the ordered attribute list"""
    return Element(tag, tuple(a), tuple(children))


def data(text: str) -> Text:
    return Text(text)


def br(a: Sequence[Tuple[str, str]] = ()) -> Element:
    return item('br', (), a)


div = partial(item, 'div')
span = partial(item, 'span')
p = partial(item, 'p')
pre = partial(item, 'pre')
article = partial(item, 'article')
body = partial(item, 'body')
html = partial(item, 'html')

a = partial(item, 'a')
i = partial(item, 'i')

ul = partial(item, 'ul')
li = partial(item, 'li')

h1 = partial(item, 'h1')
h2 = partial(item, 'h2')
h3 = partial(item, 'h3')
h4 = partial(item, 'h4')
h5 = partial(item, 'h5')
h6 = partial(item, 'h6')

small = partial(item, 'small')
sup = partial(item, 'sup')

table = partial(item, 'table')
thead = partial(item, 'thead')
th = partial(item, 'th')
tbody = partial(item, 'tbody')
tr = partial(item, 'tr')
td = partial(item, 'td')

dl = partial(item, 'dl')
dd = partial(item, 'dd')

head = partial(item, 'head')
meta = partial(item, 'meta')
title = partial(item, 'title')
script = partial(item, 'script')
link = partial(item, 'link')

nav = partial(item, 'nav')
footer = partial(item, 'footer')
