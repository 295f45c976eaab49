"""
Defines the call surface used to declare enum attributes.
"""


from .. import errors
from .accessors import ATTRIBUTE, CLASS, AccessorGenerator
from .keys import key_of
from .members import MemberTable
from .policy import ResolutionPolicy


OPTIONS = (
    'storage_field',
    'strict',
    'prefix',
    'method_suppression',
    'reveal_object',
    'dirty',
    'plural',
    'validate',
    'store',
    'resolver',
)


def declare(owner, attribute, spec, registry=None, **options):
    """
    Declares a new enum attribute for the owner and returns its generated
    accessors.  The owner itself is left untouched, callers dispatch through
    the returned table or look it up again from the registry.

    :param owner: <type>
    :param attribute: <str>
    :param spec: [<str>, ..] or [<object>, ..] or {<str>: <variant>, ..}
    :param registry: <enumfield.Registry> or None for the global registry
    :param options: any of `OPTIONS`

    :usage

        accessors = enumfield.declare(User, 'gender', ['female', 'male'], prefix=True)

        user = User()
        accessors['set_gender_male'](user)
        assert user.gender_cd == 1

    :return: <enumfield.Accessors>
    """
    if registry is None:
        import enumfield
        registry = enumfield.registry

    unknown = set(options) - set(OPTIONS)
    if unknown:
        raise errors.DeclarationError(u'Unknown options for {attribute} of {owner}: {member}',
                                      owner=owner,
                                      attribute=attribute,
                                      member=', '.join(sorted(unknown)))

    settings = registry.settings()
    merged = settings.options()
    merged.update(options)

    resolver = merged.pop('resolver', None) or key_of
    table = MemberTable.build(spec, resolver=resolver, owner=owner, attribute=attribute)
    policy = ResolutionPolicy(attribute, table, field_suffix=settings.field_suffix, **merged)

    if policy.dirty and not callable(getattr(owner, 'changes', None)):
        raise errors.DeclarationError(u'{owner} does not track changes for {attribute}',
                                      owner=owner,
                                      attribute=attribute)

    accessors = AccessorGenerator(owner, table, policy, registry=registry).generate()
    registry.register(owner, attribute, table, policy, accessors)
    return accessors


class Enum(object):
    """
    Placeholder used to declare an enum attribute inside the body of a
    `Record` subclass.  The record's metaclass declares it once the class
    name and attribute name are known.

    :usage

        class User(enumfield.Record):
            gender = enumfield.Enum(['female', 'male'])
            status = enumfield.Enum({'active': 1, 'inactive': 0}, prefix=True)
    """
    def __init__(self, spec, **options):
        self.spec = spec
        self.options = options

    def __repr__(self):
        return '<Enum {0!r}>'.format(self.spec)


def instance_method(function, name):
    def method(self, *args, **kwds):
        return function(self, *args, **kwds)
    method.__name__ = name
    method.__doc__ = getattr(function, '__doc__', None)
    return method


def bind_accessors(cls, accessors, reserved=()):
    """
    Binds the generated accessors onto a class that is still being created
    by its metaclass.  Names defined in the class body, or reserved by the
    base record type, are never overwritten.

    :param cls: <type>
    :param accessors: <enumfield.Accessors>
    :param reserved: [<str>, ..]
    """
    for accessor in accessors:
        if accessor.name in vars(cls) or accessor.name in reserved:
            raise errors.Conflict(u'{member} is already defined on {owner}, cannot generate it for {attribute}',
                                  owner=cls,
                                  attribute=accessors.policy.attribute,
                                  member=accessor.name)

        if accessor.kind == ATTRIBUTE:
            value = accessor.function
        elif accessor.kind == CLASS:
            value = staticmethod(accessor.function)
        else:
            value = instance_method(accessor.function, accessor.name)

        setattr(cls, accessor.name, value)
