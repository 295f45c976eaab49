""" Defines the common errors for the enumfield package. """


class EnumError(Exception):
    """ Defines the base error class for the enumfield package """
    pass


def owner_name(owner):
    """
    Returns the display name for an owning type, which may be given as the
    type itself or as a plain string.

    :param owner: <type> or <str>

    :return: <str>
    """
    if isinstance(owner, type):
        return owner.__name__
    return owner or ''


class DeclarationError(EnumError):
    """
    Defines the base error class for errors raised while declaring an enum.

    :usage

        raise enumfield.errors.DeclarationError('Bad spec for {attribute}', owner='User', attribute='gender')
        raise enumfield.errors.DuplicateSymbol(owner=User, attribute='gender', member='male')
    """
    DEFAULT_MESSAGE = ''

    def __init__(self, msg='', owner='', attribute='', member=''):
        msg = msg or self.DEFAULT_MESSAGE
        msg = msg.format(owner=owner_name(owner), attribute=attribute, member=member)
        super(DeclarationError, self).__init__(msg)

        self.owner = owner
        self.attribute = attribute
        self.member = member


class ValidationError(EnumError):
    """
    Raised when an enum attribute is being set with, or holds, a value that
    does not pass validation.
    """

    def __init__(self, msg, context=''):
        super(ValidationError, self).__init__(msg)
        self.context = context


# C
# ------------------------------------------------------------------------------

class ConfigurationLocked(EnumError):
    """ Raised when changing registry settings after the first declaration """
    def __init__(self):
        msg = u'Settings cannot change once enums have been declared'
        super(ConfigurationLocked, self).__init__(msg)


class Conflict(DeclarationError):
    """
    Raised when registering an attribute twice for the same owner, or when a
    generated accessor name is already taken.

    :usage

        raise enumfield.errors.Conflict(owner='User', attribute='gender')
        raise enumfield.errors.Conflict(owner='User', attribute='gender', member='is_male')
    """
    DEFAULT_MESSAGE = u'{attribute} of {owner} is already declared'


# D
# ------------------------------------------------------------------------------

class DuplicateSymbol(DeclarationError):
    """ Raised when a member spec names the same symbol twice """
    DEFAULT_MESSAGE = u'{member} is declared more than once for {attribute} of {owner}'


class DuplicateValue(DeclarationError):
    """ Raised when two symbols of a member spec share the same raw value """
    DEFAULT_MESSAGE = u'{member} shares its value with another member of {attribute} of {owner}'


# I
# ------------------------------------------------------------------------------

class InvalidMember(ValidationError):
    """
    Raised by a strict setter when assigned a value that is not a member.

    :usage

        raise InvalidMember('gender', 'unknown')
    """
    def __init__(self, attribute, value):
        msg = u'{0!r} is not a valid {1}'.format(value, attribute)
        super(InvalidMember, self).__init__(msg, context=attribute)

        self.value = value


class InvalidValue(ValidationError):
    """ Raised by the validation hook when a stored raw value is not a member """
    def __init__(self, attribute, value, msg=''):
        msg = msg or u'{0} has an invalid value: {1!r}'.format(attribute, value)
        super(InvalidValue, self).__init__(msg, context=attribute)

        self.value = value


# M
# ------------------------------------------------------------------------------

class MemberNotFound(EnumError, KeyError):
    """ Raised when a symbol or raw value lookup does not match any member """
    def __init__(self, key, msg=''):
        msg = msg or u'No member found for {0!r}'.format(key)
        super(MemberNotFound, self).__init__(msg)

        self.key = key

    def __str__(self):
        return self.args[0]


# N
# ------------------------------------------------------------------------------

class NotDeclared(DeclarationError):
    """ Raised when looking up an attribute that was never declared """
    DEFAULT_MESSAGE = u'{attribute} is not a declared enum of {owner}'


# U
# ------------------------------------------------------------------------------

class UnknownMember(MemberNotFound):
    """ Raised when coercing input that is neither a symbol, raw value nor member object """
    def __init__(self, key):
        msg = u'{0!r} is not a symbol, value or object of this enum'.format(key)
        super(UnknownMember, self).__init__(key, msg=msg)


class UnresolvableObjectKey(DeclarationError):
    """ Raised when an object-backed member cannot produce a storage key """
    def __init__(self, obj, attribute='', owner=''):
        text = repr(obj).replace('{', '{{').replace('}', '}}')
        msg = u'Cannot derive an enum key from ' + text
        super(UnresolvableObjectKey, self).__init__(msg, owner=owner, attribute=attribute)

        self.object = obj
