"""
Defines the validation hook that checks the raw value stored for an enum
attribute.  Skipping, empty value handling and messages belong to the
validator, the declaration only answers whether a raw value is known.
"""

from .. import errors


class EnumValidator(object):
    """
    Validates the raw value held by a record for one enum attribute.

    :usage

        validator = EnumValidator('gender', message='Pick a gender')
        validator.validate(user)  # raises InvalidValue
        assert validator(user) is False
    """
    def __init__(self, attribute, message='', allow_none=True, condition=None, registry=None):
        self.attribute = attribute
        self.message = message
        self.allow_none = allow_none
        self.condition = condition
        self.registry = registry

    def __call__(self, record):
        try:
            return self.validate(record)
        except errors.InvalidValue:
            return False

    def validate(self, record):
        """
        Validates the given record, raising an `InvalidValue` error when its
        raw value is not a member of the enum.

        :param record: <object>

        :return: <bool>
        """
        if self.condition is not None and not self.condition(record):
            return True

        registry = self.registry
        if registry is None:
            registry = getattr(type(record), '__registry__', None)
        if registry is None:
            import enumfield
            registry = enumfield.registry

        _, policy = registry.lookup(type(record), self.attribute)
        raw_value = policy.store.read(record, policy.storage_field)

        if raw_value is None or raw_value == '':
            if not self.allow_none:
                msg = self.message or u'{0} is required.'.format(self.attribute)
                raise errors.InvalidValue(self.attribute, raw_value, msg=msg)
        elif not policy.check(raw_value):
            raise errors.InvalidValue(self.attribute, raw_value, msg=self.message)
        return True

    @classmethod
    def from_option(cls, attribute, option, registry=None):
        """
        Creates a validator from the `validate` option of a declaration, which
        may be True or a dictionary of validator keywords.

        :param attribute: <str>
        :param option: <bool> or <dict>
        :param registry: <enumfield.Registry> or None

        :return: <EnumValidator> or None
        """
        if not option:
            return None
        elif isinstance(option, dict):
            return cls(attribute, registry=registry, **option)
        else:
            return cls(attribute, registry=registry)
