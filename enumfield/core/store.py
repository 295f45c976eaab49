"""
Defines the strategies used to read and write the raw storage field of an
owning instance.  The persistence layer behind the field is not managed here.
"""


class AbstractStore(object):
    def read(self, instance, field):
        """
        Returns the raw value held in the given field, or None when unset.

        :param instance: <object>
        :param field: <str>

        :return: <variant>
        """
        raise NotImplementedError

    def write(self, instance, field, value):
        """
        Stores the raw value in the given field.

        :param instance: <object>
        :param field: <str>
        :param value: <variant>
        """
        raise NotImplementedError


class AttributeStore(AbstractStore):
    """ Keeps the raw value as a plain attribute on the instance """
    def read(self, instance, field):
        return getattr(instance, field, None)

    def write(self, instance, field, value):
        setattr(instance, field, value)


class RecordStore(AbstractStore):
    """ Routes the raw value through `Record.get` and `Record.set` """
    def read(self, instance, field):
        return instance.get(field)

    def write(self, instance, field, value):
        instance.set(field, value)
