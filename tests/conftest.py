import copy

import pytest

from record_pointers.common import ValueType
from record_pointers.fields.base import ArrayOf, Attribute, MapOf, Nested
from record_pointers.schema import BaseSchema


class Item(BaseSchema):
    class Options:
        record_type = 'TestItem'

    product = Attribute()
    quantity = Attribute(ValueType.NUMBER)


class Customer(BaseSchema):
    class Options:
        record_type = 'TestCustomer'

    name = Attribute()
    email = Attribute()


class Opened(BaseSchema):
    class Options:
        record_type = 'TestOpenedEvent'

    by_who = Attribute()


class Closed(BaseSchema):
    class Options:
        record_type = 'TestClosedEvent'

    reason = Attribute()
    followups = ArrayOf(Attribute())


class Event(BaseSchema):
    class Options:
        record_type = 'TestEvent'
        type_property = 'eventType'
        subtypes = {'OPENED': Opened, 'CLOSED': Closed}

    happened_on = Attribute(ValueType.DATETIME)


class Order(BaseSchema):
    class Options:
        record_type = 'TestOrder'

    order_date = Attribute(ValueType.DATETIME)
    customer = Nested(Customer)
    items = ArrayOf(Item)
    tags = ArrayOf(Attribute())
    notes = MapOf(Attribute())
    attachments = MapOf(Item)
    events = ArrayOf(Event)
    parent = Nested('TestOrder')


ORDER = {
    'orderDate': '2017-01-01T10:00:00Z',
    'customer': {'name': 'John', 'email': None},
    'items': [
        {'product': 'apple', 'quantity': 2},
        {'product': 'pear', 'quantity': 1},
        {'product': 'plum', 'quantity': 7},
    ],
    'tags': ['new', 'urgent'],
    'notes': {'gift': 'yes', 'a/b': 'slash', 'm~n': 'tilde'},
    'attachments': {'invoice': {'product': 'paper', 'quantity': 1}},
    'events': [
        {'eventType': 'OPENED', 'happenedOn': '2017-01-01T10:00:00Z', 'byWho': 'john'},
        {'eventType': 'CLOSED', 'happenedOn': '2017-01-02T10:00:00Z', 'reason': 'done'},
    ],
}


@pytest.fixture(scope='session')
def order_schema():
    return Order


@pytest.fixture(scope='session')
def event_schema():
    return Event


@pytest.fixture(scope='session')
def item_schema():
    return Item


@pytest.fixture
def order():
    return copy.deepcopy(ORDER)


@pytest.fixture
def parse_order(order_schema):
    def parse(pointer, no_dash=False):
        return order_schema.parse(pointer, no_dash=no_dash)

    return parse
