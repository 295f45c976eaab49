"""
Defines the events propagated through the record signals.
"""


class Event(object):
    """ Base class used for propagating events throughout the system """
    def __init__(self):
        self.prevent_default = False


class RecordEvent(Event):
    def __init__(self, record=None):
        super(RecordEvent, self).__init__()

        self.record = record


class ChangeEvent(RecordEvent):
    """
    Sent when raw field values of a record change.

    :param changes: {<str> field: (<variant> old value, <variant> new value), ..}
    """
    def __init__(self, changes=None, **options):
        super(ChangeEvent, self).__init__(**options)

        self.changes = changes or {}

    def inflated_changes(self):
        """
        Returns the changes translated into member symbols for every field
        that backs a declared enum of the record.

        :return: {<str> attribute: (<str> old symbol, <str> new symbol), ..}
        """
        output = {}
        for attribute, accessors in type(self.record).enums().items():
            field = accessors.policy.storage_field
            if field not in self.changes:
                continue

            old_value, new_value = self.changes[field]
            output[attribute] = (symbol_or_none(accessors.table, old_value),
                                 symbol_or_none(accessors.table, new_value))
        return output


def symbol_or_none(table, raw_value):
    if raw_value is None or raw_value == '' or not table.check(raw_value):
        return None
    return table.symbol_of(raw_value)
