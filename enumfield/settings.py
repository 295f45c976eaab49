"""
Defines the Settings class object used to control the default
declaration options for an enumfield registry.
"""

import os

TRUE_VALUES = ('1', 'true', 'yes', 'on')


def env_flag(key, default):
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def env_prefix(key):
    """
    Reads the prefix option from the environment, which may be a boolean
    toggle or an explicit prefix string.

    :param key: <str>

    :return: <bool> or <str>
    """
    value = os.environ.get(key, '')
    if value.strip().lower() in TRUE_VALUES:
        return True
    elif value.strip().lower() in ('', '0', 'false', 'no', 'off'):
        return False
    return value.strip()


class Settings(object):
    def __init__(self,
                 strict=None,
                 prefix=None,
                 method_suppression=None,
                 field_suffix=None,
                 reveal_object=None,
                 default_locale=None):

        self.strict = strict if strict is not None else env_flag('ENUMFIELD_STRICT', True)
        self.prefix = prefix if prefix is not None else env_prefix('ENUMFIELD_PREFIX')
        self.method_suppression = method_suppression or os.environ.get('ENUMFIELD_METHOD_SUPPRESSION') or None
        self.field_suffix = field_suffix if field_suffix is not None else os.environ.get('ENUMFIELD_FIELD_SUFFIX', '_cd')
        self.reveal_object = reveal_object if reveal_object is not None else env_flag('ENUMFIELD_REVEAL_OBJECT', False)
        self.default_locale = default_locale or os.environ.get('ENUMFIELD_DEFAULT_LOCALE', 'en_US')

    def options(self):
        """
        Returns the declaration defaults that these settings define.

        :return: <dict>
        """
        return {
            'strict': self.strict,
            'prefix': self.prefix,
            'method_suppression': self.method_suppression,
            'reveal_object': self.reveal_object
        }
