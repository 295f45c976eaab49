import pytest


@pytest.fixture()
def table():
    from enumfield import MemberTable

    return MemberTable.build(['female', 'male'])


def test_default_policy(table):
    from enumfield import AttributeStore, ResolutionPolicy

    policy = ResolutionPolicy('gender', table)

    assert policy.attribute == 'gender'
    assert policy.storage_field == 'gender_cd'
    assert policy.strict is True
    assert policy.prefix is False
    assert policy.member_prefix() == ''
    assert policy.method_suppression == 0
    assert policy.reveal_object is False
    assert isinstance(policy.store, AttributeStore)


def test_policy_storage_field(table):
    from enumfield import ResolutionPolicy

    assert ResolutionPolicy('gender', table, storage_field='sex').storage_field == 'sex'
    assert ResolutionPolicy('gender', table, field_suffix='_id').storage_field == 'gender_id'


def test_policy_prefix(table):
    from enumfield import ResolutionPolicy, errors

    assert ResolutionPolicy('gender', table, prefix=True).member_prefix() == 'gender'
    assert ResolutionPolicy('gender', table, prefix='sex').member_prefix() == 'sex'

    with pytest.raises(errors.DeclarationError):
        ResolutionPolicy('gender', table, prefix=10)


def test_policy_method_suppression(table):
    from enumfield import ResolutionPolicy, Tier, errors

    policy = ResolutionPolicy('gender', table)
    assert not policy.suppresses(Tier.Instance)
    assert not policy.suppresses(Tier.Class)

    policy = ResolutionPolicy('gender', table, method_suppression='class_only')
    assert not policy.suppresses(Tier.Instance)
    assert policy.suppresses(Tier.Class)

    for level in ('instance_and_class', True, {'Instance', 'Class'}):
        policy = ResolutionPolicy('gender', table, method_suppression=level)
        assert policy.suppresses(Tier.Instance)
        assert policy.suppresses(Tier.Class)

    with pytest.raises(errors.DeclarationError):
        ResolutionPolicy('gender', table, method_suppression='everything')

    with pytest.raises(errors.DeclarationError):
        ResolutionPolicy('gender', table, method_suppression={'Label'})


def test_policy_check_ignores_strictness(table):
    from enumfield import ResolutionPolicy

    for strict in (True, False):
        policy = ResolutionPolicy('gender', table, strict=strict)
        assert policy.check(None)
        assert policy.check('')
        assert policy.check(1)
        assert not policy.check(5)


def test_policy_is_read_only(table):
    from enumfield import ResolutionPolicy

    policy = ResolutionPolicy('gender', table)
    with pytest.raises(AttributeError):
        policy.strict = False
