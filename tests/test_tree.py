from dataclasses import FrozenInstanceError

import pytest

from htmltree.dom import (
    Element,
    Text,
    collect_attribute_names,
    count_nodes,
    filter_whitespace,
    find_all,
    fold,
    format_outline,
    get_body_children,
    is_named,
    is_nested,
    max_depth,
    print_outline,
)
from htmltree.dom.builders import body, data, div, html, p, span
from htmltree.errors import MissingElementError
from htmltree.parser import parse


####
# Node Tests
####

def test_element_converts_lists_to_tuples():
    node = Element('a', [('href', 'x')], [Text('link')])
    assert node == Element('a', (('href', 'x'),), (Text('link'),))
    assert hash(node) == hash(Element('a', (('href', 'x'),), (Text('link'),)))


def test_element_is_immutable():
    node = Element('div')
    with pytest.raises(FrozenInstanceError):
        node.tag = 'span'


def test_element_get_returns_first_value():
    node = Element('a', [('id', '1'), ('id', '2')])
    assert node.get('id') == '1'
    assert node.get('class') is None
    assert node.get('class', '') == ''
    assert node.attribute_names == ['id', 'id']


####
# Query Tests
####

def test_is_named():
    assert is_named(Element('div'), 'div')
    assert not is_named(Element('div'), 'span')
    assert not is_named(Text('div'), 'div')


def test_find_all_does_not_descend_into_match():
    tree = parse('<div><div>x</div></div>')
    found = find_all(tree, 'div')
    assert len(found) == 1
    assert found[0] == tree[0]


def test_find_all_searches_sibling_branches_in_order():
    tree = parse('<div id="a"><div>x</div></div><section><div id="b">y</div></section><p>z</p>')
    found = find_all(tree, 'div')
    assert [node.get('id') for node in found] == ['a', 'b']


def test_find_all_no_match():
    assert find_all(parse('<p>x</p>'), 'table') == ()


def test_is_nested():
    assert is_nested('div', parse('<div><div>x</div></div>'))
    assert not is_nested('div', parse('<div>x</div><div>y</div>'))


def test_is_nested_through_other_elements():
    assert is_nested('div', parse('<main><div><section><em><div>x</div></em></section></div></main>'))
    assert not is_nested('span', parse('<div><span>a</span><p><span>b</span></p></div>'))


def test_collect_attribute_names():
    tree = parse('<a href="x"><b id="y"></b></a>')
    assert collect_attribute_names(tree) == {'href', 'id'}


def test_collect_attribute_names_empty_tree():
    assert collect_attribute_names(()) == set()


def test_get_body_children():
    tree = parse('<html><head><title>t</title></head><body><p>a</p><p>b</p></body></html>')
    children = get_body_children(tree, 'page.html')
    assert [child.tag for child in children] == ['p', 'p']


def test_get_body_children_missing_body():
    with pytest.raises(MissingElementError) as exc_info:
        get_body_children(parse('<div>no body</div>'), 'page.html')
    assert exc_info.value.count == 0
    assert 'page.html' in str(exc_info.value)
    assert 'not found' in str(exc_info.value)


def test_get_body_children_multiple_bodies():
    tree = (html([body([data('a')]), body([data('b')])]),)
    with pytest.raises(MissingElementError) as exc_info:
        get_body_children(tree, 'page.html')
    assert exc_info.value.count == 2
    assert 'multiple' in str(exc_info.value)


def test_get_body_children_counts_nested_bodies():
    tree = (html([body([div([body()])])]),)
    with pytest.raises(MissingElementError):
        get_body_children(tree)


####
# Transformation Tests
####

def test_filter_whitespace_removes_blank_text():
    tree = parse('<div>\n  <p>x</p>\n  <span> </span>\n</div>')
    assert filter_whitespace(tree) == (div([p([data('x')]), span()]),)


def test_filter_whitespace_keeps_text_with_content():
    tree = (p([data('  a  '), data('\t')]),)
    assert filter_whitespace(tree) == (p([data('  a  ')]),)


def test_filter_whitespace_is_idempotent():
    tree = parse('<html>\n<body>\n<div> <p> x </p> </div>\n</body>\n</html>\n')
    once = filter_whitespace(tree)
    assert filter_whitespace(once) == once


def test_filter_whitespace_leaves_input_untouched():
    tree = parse('<div> <p>x</p> </div>')
    before = repr(tree)
    filter_whitespace(tree)
    assert repr(tree) == before
    assert len(tree[0].children) == 3


def test_fold_visits_in_pre_order():
    tree = (div([p([data('a')]), span([data('b')])]), data('c'))

    def label(acc, node):
        return acc + [node.tag if isinstance(node, Element) else node.data]

    assert fold(tree, [], label) == ['div', 'p', 'a', 'span', 'b', 'c']


def test_count_nodes_and_max_depth():
    tree = (html([body([p([data('x')])])]),)
    assert count_nodes(tree) == 4
    assert max_depth(tree) == 3
    assert max_depth(()) == -1


####
# Outline Tests
####

def test_print_outline(capsys):
    tree = (html([body([div([p([data('x')])], a=[('id', 'main'), ('class', 'c')])])]),)
    print_outline(tree, keep_attrs=['id'])
    assert capsys.readouterr().out == 'html\n  body\n    div id=main\n      p\n'


def test_print_outline_excludes_subtree(capsys):
    tree = (body([div([p([data('x')])]), span([data('y')])]),)
    print_outline(tree, exclude=['div'])
    assert capsys.readouterr().out == 'body\n  span\n'


def test_format_outline_custom_indent():
    tree = (div([p()]),)
    assert format_outline(tree, indent_width=4) == ['div', '    p']


def test_filter_whitespace_keeps_non_breaking_space():
    tree = (p([data('\xa0')]), data(' \t\r\n\x0b\x0c'))
    assert filter_whitespace(tree) == (p([data('\xa0')]),)


####
# Deep Nesting Tests
####

def test_deeply_nested_document():
    depth = 1000
    tree = parse('<div>' * depth + 'x' + '</div>' * depth)

    assert count_nodes(tree) == depth + 1
    assert max_depth(tree) == depth
    assert len(find_all(tree, 'div')) == 1
    assert is_nested('div', tree)
    assert not is_nested('span', tree)
    assert max_depth(filter_whitespace(tree)) == depth
    lines = format_outline(tree)
    assert len(lines) == depth
    assert lines[-1] == ' ' * (2 * (depth - 1)) + 'div'
