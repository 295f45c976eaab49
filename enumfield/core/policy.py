"""
Defines the per-declaration options that control how a member table is
exposed on its owning type.
"""

from .. import errors
from ..utils.enum import enum
from ..utils.text import is_string
from .store import AttributeStore

# accessor tiers that can be suppressed
Tier = enum('Instance', 'Class')

SUPPRESSION_LEVELS = {
    None: 0,
    'none': 0,
    'class': Tier.Class,
    'class_only': Tier.Class,
    'all': Tier.Instance | Tier.Class,
    'instance_and_class': Tier.Instance | Tier.Class,
}


def suppression_flags(level):
    """
    Converts a suppression option into tier flags.  The option may be one of
    the named levels, a set of tier names or the flags themselves.

    :param level: <str> or <set> or <int> or None

    :return: <int>
    """
    if isinstance(level, bool):
        return Tier.all() if level else 0
    elif isinstance(level, set):
        try:
            return Tier.from_set(level)
        except KeyError:
            raise errors.DeclarationError(u'{member} is not a method suppression level', member=repr(level))
    elif isinstance(level, int):
        return level & Tier.all()

    try:
        return SUPPRESSION_LEVELS[level]
    except (KeyError, TypeError):
        raise errors.DeclarationError(u'{member} is not a method suppression level', member=repr(level))


class ResolutionPolicy(object):
    """
    Holds the options of a single enum declaration.  Policies are immutable
    once constructed.

    :usage

        policy = ResolutionPolicy('gender', table, prefix=True)
        assert policy.storage_field == 'gender_cd'
        assert policy.member_prefix() == 'gender'
    """
    def __init__(self,
                 attribute,
                 table,
                 storage_field='',
                 strict=True,
                 prefix=False,
                 method_suppression=None,
                 reveal_object=False,
                 dirty=False,
                 plural='',
                 validate=False,
                 store=None,
                 field_suffix='_cd'):
        if not (prefix is True or prefix is False or is_string(prefix)):
            raise errors.DeclarationError(u'prefix for {attribute} must be a boolean or string', attribute=attribute)

        values = {
            'attribute': attribute,
            'table': table,
            'storage_field': storage_field or attribute + field_suffix,
            'strict': bool(strict),
            'prefix': prefix,
            'method_suppression': suppression_flags(method_suppression),
            'reveal_object': bool(reveal_object),
            'dirty': bool(dirty),
            'plural': plural,
            'validate': validate,
            'store': store or AttributeStore()
        }
        self.__dict__.update(values)

    def __repr__(self):
        return '<ResolutionPolicy {0} -> {1}>'.format(self.attribute, self.storage_field)

    def __setattr__(self, key, value):
        raise AttributeError('ResolutionPolicy is read-only')

    def check(self, raw_value):
        """
        Returns whether or not the given raw value is valid for this
        declaration.  This is independent from `strict`, which only governs
        assignment.

        :param raw_value: <variant>

        :return: <bool>
        """
        return self.table.check(raw_value)

    def member_prefix(self):
        """
        Returns the prefix used when naming per-member accessors.

        :return: <str>
        """
        if self.prefix is True:
            return self.attribute
        return self.prefix or ''

    def suppresses(self, tier):
        """
        Returns whether or not the given accessor tier is skipped.

        :param tier: <Tier>

        :return: <bool>
        """
        return Tier.test_flag(self.method_suppression, tier)
