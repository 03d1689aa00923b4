"""Infrastructure providers."""

# Import bases
from .email import EmailProvider
from .persistence import PersistenceProvider
from .push import PushProvider
from .queue import QueueProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .email import ProdEmailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .push import ProdPushProvider  # noqa: F401
from .queue import ProdQueueProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdPushProvider",
    "ProdQueueProvider",
    "ProdStorageProvider",
    "PushProvider",
    "QueueProvider",
    "StorageProvider",
]
