from .accessors import AccessorGenerator, Accessors, EnumAttribute
from .declaration import Enum, declare
from .keys import HasEnumKey, Named, key_of
from .labels import Translations
from .members import MemberTable
from .policy import ResolutionPolicy, Tier
from .record import MetaRecord, Record
from .registry import Registry
from .store import AttributeStore, RecordStore
from .validator import EnumValidator
