"""
Defines a flag enumeration type used throughout the enumfield project.

:usage:

    from enumfield.utils.enum import enum

    Tier = enum('Instance', 'Class')

    assert Tier.Instance == 1
    assert Tier.Class == 2
    assert Tier.from_set({'Instance', 'Class'}) == 3
"""


class enum(object):
    def __init__(self, *binary_keys):
        super(enum, self).__init__()

        self.__enum = {key: 2 ** i for i, key in enumerate(binary_keys)}
        for name, value in self.__enum.items():
            setattr(self, name, value)

    def __getitem__(self, key):
        return self.__enum[key]

    def all(self):
        """
        Returns all the values joined together.

        :return: <int>
        """
        out = 0
        for value in self.__enum.values():
            out |= value
        return out

    def from_set(self, values):
        """
        Generates a flag value based on the given set of names.

        :param values: <set>

        :return: <int>
        """
        value = 0
        for flag in values:
            value |= self[flag]
        return value

    def test_flag(self, source_flags, check_flag):
        """
        Tests to see if the given flag is used within an enumerated set.

        :param source_flags: <int>
        :param check_flag: <int>

        :return: <bool>
        """
        return bool(source_flags & check_flag)
