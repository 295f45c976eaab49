"""
Derives the callable surface of a declared enum attribute.  The derivation
runs once per declaration and produces an `Accessors` table mapping each
generated name to the operation it performs.
"""

import logging

from collections import OrderedDict, namedtuple

import inflection

from .. import errors
from ..utils.text import identifier
from .labels import default_label, label_key
from .members import EMPTY_VALUES
from .policy import Tier

log = logging.getLogger(__name__)

Accessor = namedtuple('Accessor', ('name', 'kind', 'function'))

# kinds of generated accessors
ATTRIBUTE = 'attribute'
INSTANCE = 'instance'
CLASS = 'class'


class EnumAttribute(object):
    """
    Descriptor exposing the getter and setter of an enum attribute on its
    owning type.  Accessing it from the class returns the `Accessors` table.
    """
    def __init__(self, accessors):
        self.accessors = accessors

    def __get__(self, instance, owner=None):
        if instance is None:
            return self.accessors
        return self.accessors.get(instance)

    def __set__(self, instance, value):
        self.accessors.set(instance, value)

    def __delete__(self, instance):
        self.accessors.set(instance, None)


class Accessors(object):
    """
    Table of the operations generated for one enum declaration.  Instance
    operations take the owning instance as their first argument.

    :usage

        accessors = enumfield.declare(User, 'gender', ['female', 'male'])

        accessors.set(user, 'male')
        assert accessors['is_male'](user)
        assert accessors['genders']() == {'female': 0, 'male': 1}
    """
    def __init__(self, owner, table, policy, registry=None):
        self.owner = owner
        self.table = table
        self.policy = policy
        self.registry = registry
        self.plural = policy.plural or inflection.pluralize(policy.attribute)

        self.__accessors = OrderedDict()

    def __contains__(self, name):
        return name in self.__accessors

    def __getitem__(self, name):
        return self.__accessors[name].function

    def __iter__(self):
        return iter(self.__accessors.values())

    def __len__(self):
        return len(self.__accessors)

    def __repr__(self):
        return '<Accessors {0}.{1}>'.format(getattr(self.owner, '__name__', self.owner), self.policy.attribute)

    def add(self, name, kind, function):
        """
        Adds a generated operation to this table.

        :param name: <str>
        :param kind: <str>
        :param function: <callable> or <EnumAttribute>
        """
        if name in self.__accessors:
            raise errors.Conflict(u'{member} is generated twice for {attribute} of {owner}',
                                  owner=self.owner,
                                  attribute=self.policy.attribute,
                                  member=name)
        self.__accessors[name] = Accessor(name, kind, function)

    def names(self, kind=None):
        """
        Returns the generated names, optionally filtered by kind.

        :param kind: <str> or None

        :return: [<str>, ..]
        """
        return [accessor.name for accessor in self.__accessors.values() if kind is None or accessor.kind == kind]

    # operations
    # --------------------

    def get(self, instance):
        """
        Returns the symbol held by the given instance.  Unset and unrecognized
        raw values read as None, reading never fails.

        :param instance: <object>

        :return: <str> or None
        """
        raw = self.policy.store.read(instance, self.policy.storage_field)
        if raw in EMPTY_VALUES:
            return None
        try:
            return self.table.symbol_of(raw)
        except errors.MemberNotFound:
            return None

    def set(self, instance, value):
        """
        Stores the raw value of the given symbol, raw value or member object on
        the instance.  Strict declarations reject anything else, permissive
        ones store the input unchanged.  Member objects that cannot produce a
        key fail the write in both modes.

        :param instance: <object>
        :param value: <variant>
        """
        if value in EMPTY_VALUES:
            raw = None
        else:
            try:
                symbol = self.table.coerce(value)
            except errors.UnknownMember:
                if self.policy.strict:
                    raise errors.InvalidMember(self.policy.attribute, value)
                log.debug('storing unrecognized %s value: %r', self.policy.attribute, value)
                raw = value
            else:
                raw = self.table.value_of(symbol)

        self.policy.store.write(instance, self.policy.storage_field, raw)

    def collection(self, *symbols, reveal=None):
        """
        Returns member values.  Without symbols this is the full mapping in
        declaration order, with one symbol it is that member's value and with
        several it is the list of their values.

        :param symbols: <str>, ..
        :param reveal: <bool> or None, return member objects instead of keys

        :return: {<str>: <variant>, ..} or <variant> or [<variant>, ..]
        """
        if reveal is None:
            reveal = self.policy.reveal_object
        pick = self.table.object_of if reveal else self.table.value_of

        if not symbols:
            return OrderedDict((symbol, pick(symbol)) for symbol in self.table)
        elif len(symbols) == 1:
            return pick(symbols[0])
        else:
            return [pick(symbol) for symbol in symbols]

    def human_name(self, symbol, locale=None):
        """
        Returns the label for a member, falling back to its titleized symbol.

        :param symbol: <str>
        :param locale: <str> or None

        :return: <str>
        """
        label = None
        if self.registry is not None:
            key = label_key(self.owner, self.plural, symbol)
            label = self.registry.translations().lookup(key, locale)
        return label or default_label(symbol)

    def human(self, instance, locale=None):
        """
        Returns the label of the member held by the instance.

        :param instance: <object>
        :param locale: <str> or None

        :return: <str> or None
        """
        symbol = self.get(instance)
        if symbol is None:
            return None
        return self.human_name(symbol, locale=locale)

    def for_select(self, value='value', locale=None):
        """
        Returns (label, value) pairs in declaration order for building option
        lists.  Passing `value='symbol'` pairs each label with its symbol.

        :param value: <str> 'value' or 'symbol'
        :param locale: <str> or None

        :return: [(<str>, <variant>), ..]
        """
        if value not in ('value', 'symbol'):
            raise ValueError(u'value must be "value" or "symbol", not {0!r}'.format(value))

        output = []
        for symbol, raw in self.table.items():
            output.append((self.human_name(symbol, locale=locale), symbol if value == 'symbol' else raw))
        return output

    def changed(self, instance):
        """
        Returns whether or not the raw value has changed since the instance
        was last saved.

        :param instance: <enumfield.Record>

        :return: <bool>
        """
        return self.policy.storage_field in instance.changes()

    def was(self, instance):
        """
        Returns the symbol held before the pending change, or the current
        symbol when nothing changed.

        :param instance: <enumfield.Record>

        :return: <str> or None
        """
        try:
            old_value, _ = instance.changes()[self.policy.storage_field]
        except KeyError:
            return self.get(instance)

        if old_value in EMPTY_VALUES:
            return None
        try:
            return self.table.symbol_of(old_value)
        except errors.MemberNotFound:
            return None


class AccessorGenerator(object):
    """
    Derives the `Accessors` table of a declaration from its member table and
    resolution policy.
    """
    def __init__(self, owner, table, policy, registry=None):
        self.owner = owner
        self.table = table
        self.policy = policy
        self.registry = registry

    def generate(self):
        """
        Builds every operation allowed by the policy.

        :return: <Accessors>
        """
        accessors = Accessors(self.owner, self.table, self.policy, registry=self.registry)
        attribute = self.policy.attribute
        prefix = self.policy.member_prefix()
        plural = accessors.plural

        accessors.add(attribute, ATTRIBUTE, EnumAttribute(accessors))
        accessors.add(identifier(plural), CLASS, accessors.collection)
        accessors.add(identifier(plural, 'for_select'), CLASS, accessors.for_select)
        accessors.add(identifier('human', attribute), INSTANCE, accessors.human)

        if self.policy.dirty:
            accessors.add(identifier(attribute, 'changed'), INSTANCE, accessors.changed)
            accessors.add(identifier(attribute, 'was'), INSTANCE, accessors.was)

        for symbol in self.table:
            name = identifier(prefix, symbol)

            if not self.policy.suppresses(Tier.Instance):
                accessors.add('is_' + name, INSTANCE, self.predicate(accessors, symbol))
                accessors.add('set_' + name, INSTANCE, self.mutator(accessors, symbol))

            if not self.policy.suppresses(Tier.Class):
                accessors.add(name, CLASS, self.member(accessors, symbol))

        log.debug('generated %s accessors for %s', len(accessors), attribute)
        return accessors

    @staticmethod
    def member(accessors, symbol):
        def member(reveal=None):
            return accessors.collection(symbol, reveal=reveal)
        return member

    @staticmethod
    def mutator(accessors, symbol):
        def mutator(instance):
            accessors.set(instance, symbol)
            return symbol
        return mutator

    @staticmethod
    def predicate(accessors, symbol):
        def predicate(instance):
            return accessors.get(instance) == symbol
        return predicate
