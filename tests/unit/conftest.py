import pytest


@pytest.fixture()
def registry():
    from enumfield import Registry

    return Registry(strict=True, prefix=False, field_suffix='_cd', reveal_object=False, default_locale='en_US')


@pytest.fixture()
def Holder():
    class Holder(object):
        pass

    return Holder


@pytest.fixture()
def Status():
    class Status(object):
        def __init__(self, name, title=''):
            self.name = name
            self.title = title

        def __repr__(self):
            return '<Status {0}>'.format(self.name)

    return Status


@pytest.fixture()
def statuses(Status):
    return [Status('Pending'), Status('In Progress'), Status('Done')]


@pytest.fixture()
def User(registry):
    import enumfield

    class User(enumfield.Record):
        __registry__ = registry

        gender = enumfield.Enum(['female', 'male'])
        role = enumfield.Enum({'admin': 10, 'member': 1}, prefix=True, strict=False)

    return User
