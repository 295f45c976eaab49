""" Defines the process-wide table of enum declarations. """

import logging

from .. import errors
from ..settings import Settings
from .labels import Translations

log = logging.getLogger(__name__)


class Registration(object):
    __slots__ = ('table', 'policy', 'accessors')

    def __init__(self, table, policy, accessors=None):
        self.table = table
        self.policy = policy
        self.accessors = accessors

    def __iter__(self):
        yield self.table
        yield self.policy


class Registry(object):
    """
    Keeps the member table and resolution policy of every declared enum,
    keyed by owning type and attribute name.  Declarations happen while types
    are being defined and are expected to run on a single thread, lookups are
    safe from any thread afterwards.
    """
    def __init__(self, settings=None, translations=None, **options):
        self.__entries = {}
        self.__settings = settings or Settings(**options)
        self.__translations = translations or Translations(default_locale=self.__settings.default_locale)

    def accessors(self, owner, attribute):
        """
        Returns the generated accessor table for a declaration.

        :param owner: <type>
        :param attribute: <str>

        :return: <enumfield.Accessors>
        """
        return self.entry(owner, attribute).accessors

    def attributes(self, owner):
        """
        Returns the names of the enums declared directly on the owner.

        :param owner: <type>

        :return: [<str>, ..]
        """
        return [attribute for (key, attribute) in self.__entries if key is owner]

    def configure(self, **options):
        """
        Replaces the default settings for new declarations.  This may only be
        called during startup, before anything has been declared.

        :param options: keywords for <enumfield.Settings>
        """
        if self.__entries:
            raise errors.ConfigurationLocked()

        self.__settings = Settings(**options)
        self.__translations.set_default_locale(self.__settings.default_locale)

    def entry(self, owner, attribute):
        """
        Returns the full registration for a declaration, looking through the
        owner's base classes when it was not declared on the owner itself.

        :param owner: <type>
        :param attribute: <str>

        :return: <Registration>
        """
        for base in getattr(owner, '__mro__', (owner,)):
            try:
                return self.__entries[(base, attribute)]
            except KeyError:
                continue
        raise errors.NotDeclared(owner=owner, attribute=attribute)

    def is_declared(self, owner, attribute):
        try:
            self.entry(owner, attribute)
        except errors.NotDeclared:
            return False
        else:
            return True

    def lookup(self, owner, attribute):
        """
        Returns the member table and resolution policy of a declaration.

        :param owner: <type>
        :param attribute: <str>

        :return: (<enumfield.MemberTable>, <enumfield.ResolutionPolicy>)
        """
        table, policy = self.entry(owner, attribute)
        return table, policy

    def register(self, owner, attribute, table, policy, accessors=None):
        """
        Registers a declaration for the owner.

        :param owner: <type>
        :param attribute: <str>
        :param table: <enumfield.MemberTable>
        :param policy: <enumfield.ResolutionPolicy>
        :param accessors: <enumfield.Accessors> or None
        """
        key = (owner, attribute)
        if key in self.__entries:
            raise errors.Conflict(owner=owner, attribute=attribute)

        log.debug('registering %s enum on %s', attribute, getattr(owner, '__name__', owner))
        self.__entries[key] = Registration(table, policy, accessors)

    def settings(self):
        """
        Returns the default declaration settings for this registry.

        :return: <enumfield.Settings>
        """
        return self.__settings

    def translations(self):
        """
        Returns the label source used for member names.

        :return: <enumfield.Translations>
        """
        return self.__translations

    def set_translations(self, translations):
        """
        Replaces the label source, for instance with one loaded from a
        catalog file.  Generated accessors pick it up on their next lookup.

        :param translations: <enumfield.Translations>
        """
        self.__translations = translations

    def unregister(self, owner=None, attribute=None):
        """
        Removes declarations from the registry.  If no owner is supplied then
        every declaration is removed, if no attribute is supplied then every
        declaration of the owner is removed.

        :param owner: <type> or None
        :param attribute: <str> or None
        """
        if owner is None:
            self.__entries.clear()
        elif attribute is None:
            for key in [key for key in self.__entries if key[0] is owner]:
                self.__entries.pop(key)
        else:
            self.__entries.pop((owner, attribute), None)
