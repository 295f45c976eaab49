"""
Defines how object-backed members produce the scalar key that gets persisted
in the storage field.

:usage:

    class Status(object):
        def __init__(self, name):
            self.name = name

    assert key_of(Status('In Progress')) == 'in_progress'

    class Priority(object):
        def to_enum_key(self):
            return 'high'

    assert key_of(Priority()) == 'high'
"""

import abc
import decimal

from .. import errors
from ..utils.text import symbolize

SCALAR_TYPES = (str, bytes, int, float, decimal.Decimal, bool)


def has_attribute(cls, name):
    return any(name in vars(base) for base in cls.__mro__)


class HasEnumKey(abc.ABC):
    """
    Capability for objects that know the key they are stored under.  Any
    class defining a `to_enum_key` method conforms without registering.
    """
    @abc.abstractmethod
    def to_enum_key(self):
        """
        Returns the scalar key used to store this object.

        :return: <str> or <int>
        """
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is HasEnumKey:
            return callable(getattr(subclass, 'to_enum_key', None)) or NotImplemented
        return NotImplemented


class NamedMeta(abc.ABCMeta):
    def __instancecheck__(cls, instance):
        if cls is Named and 'name' in getattr(instance, '__dict__', {}):
            return True
        return super(NamedMeta, cls).__instancecheck__(instance)


class Named(metaclass=NamedMeta):
    """
    Capability for objects exposing a `name`, either as a plain attribute or
    a method.  Members of a standard `enum.Enum` conform, and so does any
    object that sets `name` on itself.
    """
    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Named and has_attribute(subclass, 'name'):
            return True
        return NotImplemented


def is_scalar(value):
    """
    Returns whether or not the given member value can be stored as is.

    :param value: <variant>

    :return: <bool>
    """
    return value is None or isinstance(value, SCALAR_TYPES)


def key_of(obj):
    """
    Derives the scalar key for the given object.  Objects conforming to
    `HasEnumKey` are asked directly, otherwise the symbolized `name` of a
    `Named` object is used.

    :param obj: <variant>

    :return: <str> or <int>
    """
    if isinstance(obj, HasEnumKey):
        return obj.to_enum_key()

    if isinstance(obj, Named):
        name = obj.name
        if callable(name):
            name = name()
        if name:
            return symbolize(name)

    raise errors.UnresolvableObjectKey(obj)
