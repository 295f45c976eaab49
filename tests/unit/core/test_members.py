import pytest


def test_ordinal_members():
    from enumfield import MemberTable

    table = MemberTable.build(['a', 'b', 'c'])

    assert table.shape() == 'ordinal'
    assert table.value_of('a') == 0
    assert table.value_of('b') == 1
    assert table.value_of('c') == 2
    assert table.symbol_of(2) == 'c'
    assert table.symbols() == ['a', 'b', 'c']


def test_reordering_ordinal_members_renumbers_them():
    from enumfield import MemberTable

    table = MemberTable.build(['b', 'a', 'c'])

    assert table.value_of('a') == 1
    assert table.value_of('b') == 0
    assert table.value_of('c') == 2


def test_scalar_members_keep_declaration_order():
    from enumfield import MemberTable

    table = MemberTable.build({'b': 5, 'a': 1})

    assert table.shape() == 'scalar'
    assert table.symbols() == ['b', 'a']
    assert table.values() == [5, 1]
    assert list(table.to_dict().items()) == [('b', 5), ('a', 1)]


def test_members_round_trip():
    from enumfield import MemberTable

    for spec in (['female', 'male'], {'active': 'A', 'inactive': 'I', 'banned': 'B'}):
        table = MemberTable.build(spec)
        for symbol in table:
            assert table.symbol_of(table.value_of(symbol)) == symbol
        for value in table.values():
            assert table.value_of(table.symbol_of(value)) == value


def test_missing_members():
    from enumfield import MemberTable, errors

    table = MemberTable.build(['female', 'male'])

    with pytest.raises(errors.MemberNotFound):
        table.value_of('other')

    with pytest.raises(errors.MemberNotFound):
        table.symbol_of(5)

    with pytest.raises(errors.MemberNotFound):
        table.symbol_of([1])


def test_duplicate_values_fail():
    from enumfield import MemberTable, errors

    with pytest.raises(errors.DuplicateValue) as info:
        MemberTable.build({'a': 1, 'b': 1}, owner='Task', attribute='state')

    assert info.value.member == 'b'
    assert info.value.attribute == 'state'


def test_empty_member_values_fail():
    from enumfield import MemberTable, errors

    with pytest.raises(errors.DeclarationError) as info:
        MemberTable.build({'unset': None, 'set': 1}, owner='Task', attribute='state')
    assert info.value.member == 'unset'

    with pytest.raises(errors.DeclarationError):
        MemberTable.build({'blank': '', 'set': 'S'})

    with pytest.raises(errors.UnresolvableObjectKey):
        MemberTable.build([object()], resolver=lambda obj: '')


def test_boolean_values_collide_with_integers():
    from enumfield import MemberTable, errors

    table = MemberTable.build({'yes': True, 'no': False})
    assert table.coerce(True) == 'yes'

    with pytest.raises(errors.DuplicateValue):
        MemberTable.build({'yes': True, 'one': 1})


def test_duplicate_symbols_fail():
    from enumfield import MemberTable, errors

    with pytest.raises(errors.DuplicateSymbol):
        MemberTable.build(['a', 'b', 'a'])


def test_invalid_specs_fail():
    from enumfield import MemberTable, errors

    with pytest.raises(errors.DeclarationError):
        MemberTable.build('female')

    with pytest.raises(errors.DeclarationError):
        MemberTable.build(10)

    with pytest.raises(errors.DeclarationError):
        MemberTable.build([])

    with pytest.raises(errors.DeclarationError):
        MemberTable.build({1: 'a'})


def test_coerce_members():
    from enumfield import MemberTable, errors

    table = MemberTable.build({'active': 'A', 'inactive': 'I'})

    assert table.coerce('active') == 'active'
    assert table.coerce('I') == 'inactive'

    with pytest.raises(errors.UnknownMember):
        table.coerce('X')

    with pytest.raises(errors.UnknownMember):
        table.coerce({'unhashable': True})


def test_check_raw_values():
    from enumfield import MemberTable

    table = MemberTable.build(['female', 'male'])

    assert table.check(None)
    assert table.check('')
    assert table.check(0)
    assert table.check(1)
    assert not table.check(2)
    assert not table.check('female')
    assert not table.check([0])


def test_table_is_read_only():
    from enumfield import MemberTable

    table = MemberTable.build(['female', 'male'])

    with pytest.raises(AttributeError):
        table.values = {}


def test_object_sequence_members(statuses):
    from enumfield import MemberTable

    table = MemberTable.build(statuses)

    assert table.shape() == 'object'
    assert table.symbols() == ['pending', 'in_progress', 'done']
    assert table.value_of('pending') == 'pending'
    assert table.object_of('pending') is statuses[0]
    assert table.coerce(statuses[1]) == 'in_progress'
    assert table.coerce('done') == 'done'


def test_object_mapping_members(Status):
    from enumfield import MemberTable, errors

    pending = Status('Pending')
    closed = Status('Closed')
    table = MemberTable.build({'open': pending, 'closed': closed})

    assert table.shape() == 'object'
    assert table.value_of('open') == 'pending'
    assert table.symbol_of('closed') == 'closed'
    assert table.object_of('open') is pending
    assert table.coerce(pending) == 'open'

    with pytest.raises(errors.UnknownMember):
        table.coerce(Status('Archived'))


def test_unresolvable_object_members():
    from enumfield import MemberTable, errors

    with pytest.raises(errors.UnresolvableObjectKey) as info:
        MemberTable.build([object()], owner='Task', attribute='state')

    assert info.value.attribute == 'state'


def test_object_of_scalar_members():
    from enumfield import MemberTable

    table = MemberTable.build({'low': 1, 'high': 3})
    assert table.object_of('high') == 3
