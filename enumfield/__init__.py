"""
Enum attributes backed by scalar storage fields.
"""

# define authorship information
__authors__ = [
    ('Eric Hulser', 'eric.hulser@gmail.com')
]

__author__ = ','.join((x[0] for x in __authors__))
__email__ = ','.join((x[1] for x in __authors__))
__copyright__ = 'Copyright (c) 2011-2016'
__license__ = 'MIT'


# auto-generated version file from releasing
try:
    from ._version import __major__, __minor__, __revision__, __hash__
except ImportError:  # pragma: no cover
    __major__, __minor__, __revision__, __hash__ = (0, 0, 0, '')

__version_info__ = (__major__, __minor__, __revision__)
__version__ = '{0}.{1}.{2}'.format(*__version_info__)


import logging
logger = logging.getLogger(__name__)

# import global symbols
from . import errors
from . import events

from .settings import Settings
from .core.accessors import AccessorGenerator, Accessors
from .core.declaration import Enum, declare
from .core.keys import HasEnumKey, Named, key_of
from .core.labels import Translations
from .core.members import MemberTable
from .core.policy import ResolutionPolicy, Tier
from .core.registry import Registry
from .core.store import AttributeStore, RecordStore
from .core.validator import EnumValidator

# define the global registry
registry = Registry()

from .core.record import Record
