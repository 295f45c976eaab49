def test_label_keys():
    from enumfield.core.labels import label_key

    class OrderItem(object):
        pass

    assert label_key(OrderItem, 'states', 'in_stock') == 'enumfield.order_item.states.in_stock'
    assert label_key('User', 'genders', 'male') == 'enumfield.user.genders.male'


def test_default_labels():
    from enumfield.core.labels import default_label

    assert default_label('female') == 'Female'
    assert default_label('in_progress') == 'In Progress'


def test_translations_lookup():
    from enumfield import Translations

    translations = Translations({'en_US': {'a': 'A'}}, default_locale='en_US')

    assert translations.lookup('a') == 'A'
    assert translations.lookup('b') is None
    assert translations.lookup('a', 'fr_FR') is None

    translations.add('fr_FR', {'a': 'Ah'})
    assert translations.lookup('a', 'fr_FR') == 'Ah'
    assert set(translations.locales()) == {'en_US', 'fr_FR'}

    translations.set_default_locale('fr_FR')
    assert translations.lookup('a') == 'Ah'


def test_human_names_for_records(User, registry):
    registry.translations().add('en_US', {'enumfield.user.roles.admin': 'Administrator'})

    user = User(role='admin')
    assert user.human_role() == 'Administrator'
    assert user.human_gender() is None

    user.set_female()
    assert user.human_gender() == 'Female'
    assert User.gender.human_name('male', locale='fr_FR') == 'Male'


def test_replacing_translations(User, registry):
    from enumfield import Translations

    registry.set_translations(Translations({'en_GB': {'enumfield.user.genders.female': 'Woman'}},
                                           default_locale='en_GB'))

    assert registry.translations().default_locale() == 'en_GB'
    assert User.gender.human_name('female') == 'Woman'
    assert User.genders_for_select() == [('Woman', 0), ('Male', 1)]
