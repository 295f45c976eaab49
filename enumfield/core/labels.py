"""
Defines the label source used to give enum members human readable names.
"""

import inflection


def label_key(owner, plural, symbol):
    """
    Builds the lookup key for a member label, for instance
    `enumfield.user.genders.female`.

    :param owner: <type> or <str>
    :param plural: <str>
    :param symbol: <str>

    :return: <str>
    """
    name = owner.__name__ if isinstance(owner, type) else owner
    return '.'.join(('enumfield', inflection.underscore(name), plural, str(symbol)))


def default_label(symbol):
    """
    Returns the fallback label of a member that has no translation.

    :param symbol: <str>

    :return: <str>
    """
    return inflection.titleize(str(symbol))


class Translations(object):
    """
    In-memory catalog of labels per locale.

    :usage

        translations = Translations({
            'en_US': {'enumfield.user.genders.female': 'Woman'},
            'fr_FR': {'enumfield.user.genders.female': 'Femme'}
        })
        assert translations.lookup('enumfield.user.genders.female', 'fr_FR') == 'Femme'
    """
    def __init__(self, catalog=None, default_locale='en_US'):
        self.__catalog = {locale: dict(labels) for locale, labels in (catalog or {}).items()}
        self.__default_locale = default_locale

    def add(self, locale, labels):
        """
        Merges the given labels into the catalog for a locale.

        :param locale: <str>
        :param labels: {<str> key: <str> label, ..}
        """
        self.__catalog.setdefault(locale, {}).update(labels)

    def default_locale(self):
        return self.__default_locale

    def locales(self):
        return list(self.__catalog)

    def lookup(self, key, locale=None):
        """
        Returns the label for the given key, or None when it is missing.

        :param key: <str>
        :param locale: <str> or None

        :return: <str> or None
        """
        return self.__catalog.get(locale or self.__default_locale, {}).get(key)

    def set_default_locale(self, locale):
        self.__default_locale = locale
