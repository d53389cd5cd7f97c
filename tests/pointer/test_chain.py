import attr
import pytest
from jsonpointer import resolve_pointer

from record_pointers import parse
from record_pointers.jsonpointer import JSONPointer


@pytest.fixture
def successive(order_schema):
    pointers = [parse(order_schema, '')]
    for token in ['events', '0', 'CLOSED:followups', '2']:
        pointers.append(pointers[-1].create_child_pointer(token))
    return pointers


def test_is_child_of(successive):
    for i, child in enumerate(successive):
        for j, other in enumerate(successive):
            assert child.is_child_of(other) is (j < i), (str(child), str(other))


def test_is_child_of_siblings(parse_order):
    assert not parse_order('/items/1').is_child_of(parse_order('/items/0'))
    assert not parse_order('/items/10').is_child_of(parse_order('/items/1'))
    assert not parse_order('/notes/ab').is_child_of(parse_order('/notes/a'))


def test_chain(successive):
    leaf = successive[-1]
    assert leaf.chain == tuple(successive)
    assert leaf.chain[0].is_root()
    assert all(p.parent is prev for prev, p in zip(leaf.chain, leaf.chain[1:]))
    assert successive[0].chain == (successive[0],)


def test_only_root_has_no_descriptor(successive):
    for pointer in successive:
        assert pointer.is_root() is (pointer.property_descriptor is None)


def test_immutable(parse_order):
    pointer = parse_order('/items/0')
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        pointer.element_index = 1


def test_repr(parse_order):
    assert repr(parse_order('/items/0')) == "<RecordElementPointer '/items/0'>"


def test_equality(parse_order):
    assert parse_order('/notes/a~1b') == parse_order('/notes/a~1b')
    assert parse_order('/notes/a~1b') != parse_order('/notes/a~0b')
    assert len({parse_order('/items/0'), parse_order('/items/0'), parse_order('/items')}) == 2


def test_json_pointer(parse_order, order):
    pointer = parse_order('/notes/a~1b')
    json_pointer = pointer.json_pointer
    assert isinstance(json_pointer, JSONPointer)
    assert json_pointer.path == '/notes/a~1b'
    assert json_pointer.parts == ['notes', 'a/b']
    assert json_pointer.resolve(order) == pointer.get_value(order)
    assert resolve_pointer(order, str(parse_order('/items/1/product'))) == 'pear'


def test_json_pointer_composition():
    pointer = JSONPointer('/items') / 0 / 'quantity'
    assert pointer.path == '/items/0/quantity'
    assert (JSONPointer('/a') / JSONPointer('/b/c')).parts == ['a', 'b', 'c']


def test_shared_between_records(parse_order, order):
    pointer = parse_order('/items/0/quantity')
    other = {'items': [{'quantity': 42}]}
    assert pointer.get_value(order) == 2
    assert pointer.get_value(other) == 42


def test_json_pointer_exports():
    from record_pointers import jsonpointer
    assert jsonpointer.__all__ == ('JSONPointer', 'escape', 'split_tokens')
