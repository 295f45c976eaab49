"""
Defines the MemberTable, the two way mapping between the symbols of an enum
attribute and the raw values stored for them.
"""

import logging

from collections.abc import Mapping

from .. import errors
from ..utils.text import is_string
from .keys import is_scalar, key_of

log = logging.getLogger(__name__)

EMPTY_VALUES = (None, '')


class MemberTable(object):
    """
    Holds the members of one declared enum attribute.  Tables are built once
    through `MemberTable.build` and are read-only afterwards.

    :usage

        table = MemberTable.build(['female', 'male'])
        assert table.value_of('male') == 1
        assert table.symbol_of(0) == 'female'

        table = MemberTable.build({'active': 'A', 'inactive': 'I'})
        assert table.coerce('A') == 'active'
    """
    def __init__(self, values, objects=None, shape='scalar', resolver=key_of, owner='', attribute=''):
        self.__shape = shape
        self.__resolver = resolver
        self.__values = dict(values)
        self.__symbols = {}
        self.__objects = dict(objects or {})
        self.__owner = owner
        self.__attribute = attribute
        self.__locked = False

        for symbol, value in self.__values.items():
            if value in self.__symbols:
                raise errors.DuplicateValue(owner=owner, attribute=attribute, member=symbol)
            self.__symbols[value] = symbol

        self.__locked = True

    def __contains__(self, symbol):
        return symbol in self.__values

    def __iter__(self):
        return iter(self.__values)

    def __len__(self):
        return len(self.__values)

    def __repr__(self):
        return '<MemberTable {0} {1}>'.format(self.__shape, list(self.__values))

    def __setattr__(self, key, value):
        if getattr(self, '_MemberTable__locked', False):
            raise AttributeError('MemberTable is read-only')
        super(MemberTable, self).__setattr__(key, value)

    def check(self, raw_value):
        """
        Returns whether or not the given raw value may be held in storage.
        Empty values are always allowed since they represent an unset
        attribute.

        :param raw_value: <variant>

        :return: <bool>
        """
        if raw_value in EMPTY_VALUES:
            return True
        try:
            return raw_value in self.__symbols
        except TypeError:
            return False

    def coerce(self, value):
        """
        Resolves the given input to a member symbol.  The input is tried as a
        symbol first, then as a raw value and finally, for object backed
        tables, as a member object.  A member object that cannot produce a
        key raises `UnresolvableObjectKey` instead of `UnknownMember`.

        :param value: <variant>

        :return: <str>
        """
        try:
            if value in self.__values:
                return value
            elif value in self.__symbols:
                return self.__symbols[value]
        except TypeError:
            pass

        if self.__shape == 'object' and not is_scalar(value):
            key = self.__resolve(self.__resolver, value, {'owner': self.__owner, 'attribute': self.__attribute})
            try:
                return self.__symbols[key]
            except (KeyError, TypeError):
                pass

        raise errors.UnknownMember(value)

    def items(self):
        """
        Returns the (symbol, value) pairs in declaration order.

        :return: [(<str>, <variant>), ..]
        """
        return list(self.__values.items())

    def object_of(self, symbol):
        """
        Returns the object a member was declared with.  For scalar and
        ordinal tables this is the raw value.

        :param symbol: <str>

        :return: <variant>
        """
        if self.__shape == 'object':
            try:
                return self.__objects[symbol]
            except KeyError:
                raise errors.MemberNotFound(symbol)
        return self.value_of(symbol)

    def shape(self):
        """
        Returns how the members were declared: `ordinal`, `scalar` or `object`.

        :return: <str>
        """
        return self.__shape

    def symbol_of(self, raw_value):
        """
        Returns the symbol stored under the given raw value.

        :param raw_value: <variant>

        :return: <str>
        """
        try:
            return self.__symbols[raw_value]
        except (KeyError, TypeError):
            raise errors.MemberNotFound(raw_value)

    def symbols(self):
        """
        Returns the member symbols in declaration order.

        :return: [<str>, ..]
        """
        return list(self.__values)

    def to_dict(self):
        """
        Returns a copy of the symbol to value mapping, in declaration order.

        :return: {<str>: <variant>, ..}
        """
        return dict(self.__values)

    def value_of(self, symbol):
        """
        Returns the raw value stored for the given symbol.

        :param symbol: <str>

        :return: <variant>
        """
        try:
            return self.__values[symbol]
        except (KeyError, TypeError):
            raise errors.MemberNotFound(symbol)

    def values(self):
        """
        Returns the raw values in declaration order.

        :return: [<variant>, ..]
        """
        return list(self.__values.values())

    @classmethod
    def build(cls, spec, resolver=key_of, owner='', attribute=''):
        """
        Creates a new table from a member spec.  A sequence of symbols numbers
        its members by position, a sequence of objects derives both symbol and
        value through the resolver, and a mapping takes its values as given,
        unless they are objects in which case the resolver supplies the value.

        Reordering a sequence renumbers all of its members.  Empty values
        (None or an empty string) mean "unset" in storage and cannot be
        member values.  Values are compared the way Python compares them, so
        True collides with 1 and False with 0.

        :param spec: [<str>, ..] or [<object>, ..] or {<str>: <variant>, ..}
        :param resolver: <callable>
        :param owner: <type> or <str> used for error messages
        :param attribute: <str> used for error messages

        :return: <MemberTable>
        """
        context = {'owner': owner, 'attribute': attribute}

        if isinstance(spec, Mapping):
            pairs = list(spec.items())
        elif is_string(spec):
            pairs = None
        else:
            try:
                pairs = list(spec)
            except TypeError:
                pairs = None

        if pairs is None:
            raise errors.DeclarationError(u'Members of {attribute} on {owner} must be a sequence or mapping',
                                          **context)
        elif not pairs:
            raise errors.DeclarationError(u'{attribute} on {owner} has no members', **context)

        if isinstance(spec, Mapping):
            if all(is_scalar(value) for _, value in pairs):
                pairs = cls.__check_symbols(pairs, context)
                for symbol, value in pairs:
                    if value in EMPTY_VALUES:
                        raise errors.DeclarationError(u'{member} of {attribute} on {owner} has an empty value',
                                                      member=symbol, **context)
                log.debug('building scalar members for %s: %s', attribute, pairs)
                return cls(pairs, shape='scalar', resolver=resolver, **context)

            objects = cls.__check_symbols(pairs, context)
            values = [(symbol, cls.__resolve(resolver, obj, context)) for symbol, obj in objects]
            return cls(values, objects=objects, shape='object', resolver=resolver, **context)

        if all(is_string(member) for member in pairs):
            pairs = cls.__check_symbols([(symbol, index) for index, symbol in enumerate(pairs)], context)
            return cls(pairs, shape='ordinal', resolver=resolver, **context)

        objects = [(cls.__resolve(resolver, obj, context), obj) for obj in pairs]
        objects = cls.__check_symbols(objects, context)
        values = [(symbol, symbol) for symbol, _ in objects]
        return cls(values, objects=objects, shape='object', resolver=resolver, **context)

    @staticmethod
    def __check_symbols(pairs, context):
        seen = set()
        for symbol, _ in pairs:
            if not symbol or not is_string(symbol):
                raise errors.DeclarationError(u'{member} is not a valid member of {attribute} on {owner}',
                                              member=repr(symbol), **context)
            elif symbol in seen:
                raise errors.DuplicateSymbol(member=symbol, **context)
            seen.add(symbol)
        return pairs

    @staticmethod
    def __resolve(resolver, obj, context):
        try:
            key = resolver(obj)
        except errors.UnresolvableObjectKey:
            raise errors.UnresolvableObjectKey(obj, **context)

        if key in EMPTY_VALUES:
            raise errors.UnresolvableObjectKey(obj, **context)
        return key
