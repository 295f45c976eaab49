import pytest


def test_register_and_lookup(registry, Holder):
    from enumfield import MemberTable, ResolutionPolicy

    table = MemberTable.build(['female', 'male'])
    policy = ResolutionPolicy('gender', table)

    registry.register(Holder, 'gender', table, policy)

    assert registry.lookup(Holder, 'gender') == (table, policy)
    assert registry.attributes(Holder) == ['gender']
    assert registry.is_declared(Holder, 'gender')
    assert not registry.is_declared(Holder, 'status')


def test_duplicate_registration_conflicts(registry, Holder):
    from enumfield import MemberTable, ResolutionPolicy, errors

    table = MemberTable.build(['female', 'male'])
    policy = ResolutionPolicy('gender', table)
    registry.register(Holder, 'gender', table, policy)

    with pytest.raises(errors.Conflict):
        registry.register(Holder, 'gender', table, policy)


def test_lookup_undeclared_attribute(registry, Holder):
    from enumfield import errors

    with pytest.raises(errors.NotDeclared):
        registry.lookup(Holder, 'gender')


def test_multiple_attributes_per_owner(registry, Holder):
    from enumfield import declare

    gender = declare(Holder, 'gender', ['female', 'male'], registry=registry)
    status = declare(Holder, 'status', {'active': 'A', 'inactive': 'I'}, registry=registry, prefix=True)

    assert registry.attributes(Holder) == ['gender', 'status']
    assert registry.accessors(Holder, 'gender') is gender
    assert registry.accessors(Holder, 'status') is status

    holder = Holder()
    gender.set(holder, 'male')
    status.set(holder, 'inactive')

    assert holder.gender_cd == 1
    assert holder.status_cd == 'I'
    assert gender.get(holder) == 'male'
    assert status.get(holder) == 'inactive'


def test_same_attribute_on_different_owners(registry):
    from enumfield import declare

    class Cat(object):
        pass

    class Dog(object):
        pass

    declare(Cat, 'size', ['small', 'big'], registry=registry)
    declare(Dog, 'size', ['big', 'small'], registry=registry)

    assert registry.lookup(Cat, 'size')[0].value_of('small') == 0
    assert registry.lookup(Dog, 'size')[0].value_of('small') == 1


def test_lookup_through_base_types(registry, Holder):
    from enumfield import declare

    class SubHolder(Holder):
        pass

    gender = declare(Holder, 'gender', ['female', 'male'], registry=registry)

    assert registry.accessors(SubHolder, 'gender') is gender
    assert registry.attributes(SubHolder) == []


def test_configure_before_declarations(registry, Holder):
    from enumfield import declare, errors

    registry.configure(strict=False, prefix=True, default_locale='fr_FR')
    assert registry.settings().strict is False
    assert registry.translations().default_locale() == 'fr_FR'

    gender = declare(Holder, 'gender', ['female', 'male'], registry=registry)
    assert gender.policy.strict is False
    assert 'is_gender_male' in gender

    with pytest.raises(errors.ConfigurationLocked):
        registry.configure(strict=True)


def test_unregister(registry, Holder):
    from enumfield import declare

    declare(Holder, 'gender', ['female', 'male'], registry=registry)
    declare(Holder, 'status', ['on', 'off'], registry=registry)

    registry.unregister(Holder, 'gender')
    assert registry.attributes(Holder) == ['status']

    registry.unregister(Holder)
    assert registry.attributes(Holder) == []

    declare(Holder, 'gender', ['female', 'male'], registry=registry)
    registry.unregister()
    assert not registry.is_declared(Holder, 'gender')
