import inflection
import pytest

from record_pointers.common import Collection, ValueType
from record_pointers.fields.base import ArrayOf, Attribute, MapOf, Nested
from record_pointers.helpers import MISSING
from record_pointers.schema import BaseSchema, PolymorphicContainer, PropertiesContainer


def test_declared_fields(order_schema):
    assert list(order_schema._declared_fields) == [
        'order_date', 'customer', 'items', 'tags', 'notes', 'attachments', 'events', 'parent',
    ]
    field = order_schema.get_field('order_date')
    assert field.key == 'order_date'
    assert field.name == 'orderDate'
    assert field.mapped_key == 'order_date'

    with pytest.raises(KeyError):
        order_schema.get_field('orderDate')


def test_fields_are_not_class_attributes(order_schema):
    assert not hasattr(order_schema, 'items')


def test_field_kinds(order_schema):
    container = order_schema.get_container()
    items = container.get_property_descriptor('items')
    assert items.is_array and not items.is_map
    assert items.collection is Collection.ARRAY
    assert items.scalar_value_type is ValueType.OBJECT
    assert isinstance(items.nested_properties, PropertiesContainer)

    notes = container.get_property_descriptor('notes')
    assert notes.is_map and not notes.is_array
    assert notes.scalar_value_type is ValueType.STRING
    assert notes.nested_properties is None

    customer = container.get_property_descriptor('customer')
    assert not customer.is_array and not customer.is_map
    assert customer.scalar_value_type is ValueType.OBJECT
    assert customer.container is container


def test_inheritance():
    class Base(BaseSchema):
        class Options:
            record_type = 'TestInheritanceBase'

        created_on = Attribute(ValueType.DATETIME)

    class Derived(Base):
        class Options:
            record_type = 'TestInheritanceDerived'

        title = Attribute()

    assert list(Derived._declared_fields) == ['created_on', 'title']
    assert Derived.get_container().has_property('createdOn')
    assert not Base.get_container().has_property('title')
    assert Derived.get_field('created_on') is not Base.get_field('created_on')


def test_options_are_inherited_but_record_type_is_not():
    class Base(BaseSchema):
        class Options:
            record_type = 'TestOptionsBase'
            inflect = inflection.dasherize

        created_on = Attribute()

    class Derived(Base):
        updated_on = Attribute()

    assert Derived.opts.record_type == 'Derived'
    assert Derived.get_field('updated_on').name == 'updated-on'


@pytest.mark.parametrize('inflector,expected', [
    (None, 'created_on'),
    (inflection.dasherize, 'created-on'),
    (inflection.camelize, 'CreatedOn'),
])
def test_inflect(inflector, expected):
    class Schema(BaseSchema):
        class Options:
            record_type = 'TestInflect'
            inflect = inflector

        created_on = Attribute()

    assert Schema.get_field('created_on').name == expected


def test_explicit_names():
    class Schema(BaseSchema):
        class Options:
            record_type = 'TestExplicitNames'

        created_on = Attribute(name='created', mapped_key='created_at')

    field = Schema.get_field('created_on')
    assert field.name == 'created'
    assert field.mapped_key == 'created_at'


@pytest.mark.parametrize('name', ['OPENED:byWho', 'a/b', 'a~b', '_a', 'a b'])
def test_invalid_field_name(name):
    with pytest.raises(ValueError):
        Attribute(name=name)


def test_duplicate_names():
    with pytest.raises(ValueError):
        class Schema(BaseSchema):
            class Options:
                record_type = 'TestDuplicateNames'

            created_on = Attribute()
            created = Attribute(name='createdOn')


def test_invalid_field_declarations():
    with pytest.raises(ValueError):
        Attribute(ValueType.OBJECT)
    with pytest.raises(TypeError):
        ArrayOf(ArrayOf())
    with pytest.raises(TypeError):
        MapOf(42)


def test_collection_item_shortcuts(item_schema):
    assert ArrayOf().scalar_value_type is ValueType.STRING
    assert ArrayOf(Attribute(ValueType.NUMBER)).scalar_value_type is ValueType.NUMBER
    assert isinstance(MapOf(item_schema).item, Nested)
    assert isinstance(ArrayOf('TestItem').item, Nested)


def test_same_schema_at_different_paths(order_schema):
    container = order_schema.get_container()
    items = container.get_property_descriptor('items').nested_properties
    attachments = container.get_property_descriptor('attachments').nested_properties
    assert items.nested_path == 'items.'
    assert attachments.nested_path == 'attachments.'
    assert items.schema is attachments.schema
    assert items.get_property_descriptor('quantity') is not attachments.get_property_descriptor('quantity')


def test_root_container_is_cached(order_schema):
    assert order_schema.get_container() is order_schema.get_container()
    assert order_schema.get_container().nested_path == ''
    assert order_schema.get_container().record_type == 'TestOrder'


def test_nested_containers_are_lazy(order_schema):
    container = order_schema.build_container()
    parent = container.get_property_descriptor('parent')
    assert parent._nested is MISSING
    nested = parent.nested_properties
    assert nested.nested_path == 'parent.'
    assert nested.get_property_descriptor('parent').nested_properties.nested_path == 'parent.parent.'
    assert parent.nested_properties is nested


class TestPolymorphic:

    def test_container(self, event_schema):
        container = event_schema.get_container()
        assert isinstance(container, PolymorphicContainer)
        assert container.is_polymorphic
        assert container.type_property_name == 'eventType'
        assert container.property_names == ('happenedOn', 'eventType')
        assert list(container.subtypes) == ['OPENED', 'CLOSED']

    def test_type_property(self, event_schema):
        type_property = event_schema.get_container().get_property_descriptor('eventType')
        assert type_property.scalar_value_type is ValueType.STRING
        assert type_property.nested_properties is None
        assert not hasattr(type_property, 'optional')

    def test_subtypes(self, event_schema):
        container = event_schema.get_container()
        assert container.has_subtype('OPENED')
        assert not container.has_subtype('byWho')
        assert not container.has_property('OPENED')

        opened = container.get_subtype_descriptor('OPENED')
        assert opened.scalar_value_type is ValueType.OBJECT
        assert opened.nested_properties.nested_path == 'OPENED.'
        assert opened.nested_properties.has_property('byWho')
        assert not opened.nested_properties.is_polymorphic

        with pytest.raises(KeyError):
            container.get_subtype_descriptor('REOPENED')

    def test_nested(self, order_schema):
        events = order_schema.get_container().get_property_descriptor('events')
        container = events.nested_properties
        assert container.is_polymorphic
        closed = container.get_subtype_descriptor('CLOSED')
        assert closed.nested_properties.nested_path == 'events.CLOSED.'

    def test_type_property_clash(self):
        with pytest.raises(ValueError):
            class Schema(BaseSchema):
                class Options:
                    record_type = 'TestTypeClash'
                    subtypes = {'A': BaseSchema}

                type = Attribute()

    def test_invalid_subtype_name(self):
        with pytest.raises(ValueError):
            class Schema(BaseSchema):
                class Options:
                    record_type = 'TestBadSubtype'
                    subtypes = {'A:B': BaseSchema}

    def test_default_type_property(self, item_schema):
        class Shape(BaseSchema):
            class Options:
                record_type = 'TestShape'
                subtypes = {'ITEM': item_schema}

        assert Shape.parse('/type').property_path == 'type'
        assert Shape.parse('/ITEM:quantity').property_path == 'ITEM.quantity'
