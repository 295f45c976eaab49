"""
Defines the Record base class, a minimal owning type that keeps the raw
storage fields of its enum attributes and reports changes to them.
"""

import blinker

from .. import events
from .declaration import Enum, bind_accessors, declare
from .store import RecordStore
from .validator import EnumValidator


RESERVED = (
    'changed',
    'changes',
    'enums',
    'get',
    'is_modified',
    'mark_saved',
    'on_change',
    'registry',
    'set',
    'update',
    'validate',
)


def registry_of(cls):
    """
    Returns the registry a record type declares its enums in.

    :param cls: subclass of <Record>

    :return: <enumfield.Registry>
    """
    registry = getattr(cls, '__registry__', None)
    if registry is None:
        import enumfield
        registry = enumfield.registry
    return registry


class MetaRecord(type):
    """
    Declares the `Enum` placeholders of a record class while the class is
    being created, binding the generated accessors before the new type is
    returned.
    """
    def __new__(mcs, name, bases, attrs):
        placeholders = [(key, value) for key, value in attrs.items() if isinstance(value, Enum)]
        for key, _ in placeholders:
            attrs.pop(key)

        new_record = super(MetaRecord, mcs).__new__(mcs, name, bases, attrs)
        if not placeholders:
            return new_record

        registry = registry_of(new_record)
        try:
            for attribute, placeholder in placeholders:
                options = dict(placeholder.options)
                options.setdefault('store', RecordStore())

                accessors = declare(new_record, attribute, placeholder.spec, registry=registry, **options)
                bind_accessors(new_record, accessors, reserved=RESERVED)
        except Exception:
            # no declarations outlive a class that failed to build
            registry.unregister(new_record)
            raise

        return new_record


class Record(object, metaclass=MetaRecord):
    """
    Defines the base class for types that own enum attributes.

    :usage

        class User(enumfield.Record):
            gender = enumfield.Enum(['female', 'male'])

        user = User(gender='male')
        assert user.gender == 'male'
        assert user.get('gender_cd') == 1
        assert user.is_male()
    """
    __registry__ = None

    # signals
    changed = blinker.Signal()

    def __init__(self, values=None, **kwds):
        self.__attributes = {}
        self.__base_attributes = {}

        values = dict(values or {})
        values.update(kwds)
        self.update(values)

    def __repr__(self):
        return '<{0} {1}>'.format(type(self).__name__, self.__attributes)

    def changes(self):
        """
        Returns the raw fields that changed since this record was last marked
        as saved.

        :return: {<str> field: (<variant> old value, <variant> new value), ..}
        """
        output = {}
        for field, value in self.__attributes.items():
            old_value = self.__base_attributes.get(field)
            try:
                is_changed = old_value != value
            except TypeError:  # pragma: no cover
                is_changed = True
            if is_changed:
                output[field] = (old_value, value)
        return output

    def get(self, field, default=None):
        """
        Returns the raw value held in the given storage field.

        :param field: <str>
        :param default: <variant>

        :return: <variant>
        """
        return self.__attributes.get(field, default)

    def is_modified(self):
        return bool(self.changes())

    def mark_saved(self):
        """
        Marks the current raw values as persisted, clearing the changes.
        """
        self.__base_attributes = dict(self.__attributes)

    def on_change(self, event):
        """
        Called when a raw field of this record changes.  The default behavior
        is to send the `changed` signal to any receivers.

        :param event: <enumfield.events.ChangeEvent>
        """
        Record.changed.send(type(self), event=event)
        if not event.prevent_default:
            Record.changed.send(self, event=event)

    def set(self, field, value, silent=False):
        """
        Sets the raw value of a storage field.  If the `silent` flag is set to
        True then the `on_change` event callback will not be executed.

        :param field: <str>
        :param value: <variant>
        :param silent: <bool> (default: False)

        :return: (<variant> old value, <variant> new value) or None
        """
        orig_value = self.__attributes.get(field)
        self.__attributes[field] = value

        try:
            is_changed = orig_value != value
        except TypeError:  # pragma: no cover
            is_changed = True

        if not is_changed:
            return None

        if not silent:
            event = events.ChangeEvent(record=self, changes={field: (orig_value, value)})
            self.on_change(event)

        return orig_value, value

    def update(self, values):
        """
        Updates this record with the given values.  Keys naming a declared enum
        go through its setter, any other key is stored as a raw field.

        :param values: {<str>: <variant>, ..}
        """
        enums = type(self).enums()
        for key, value in values.items():
            if key in enums:
                enums[key].set(self, value)
            else:
                self.set(key, value)

    def validate(self):
        """
        Runs the validation hook of every enum declared with the `validate`
        option.  If this method succeeds it will return True, otherwise an
        `InvalidValue` error is raised.

        :return: <bool>
        """
        registry = registry_of(type(self))
        for attribute, accessors in type(self).enums().items():
            validator = EnumValidator.from_option(attribute, accessors.policy.validate, registry=registry)
            if validator is not None:
                validator.validate(self)
        return True

    @classmethod
    def enums(cls):
        """
        Returns the generated accessors for every enum declared on this type
        or its bases.

        :return: {<str> attribute: <enumfield.Accessors>, ..}
        """
        registry = registry_of(cls)
        output = {}
        for base in reversed(cls.__mro__):
            for attribute in registry.attributes(base):
                output[attribute] = registry.accessors(base, attribute)
        return output
