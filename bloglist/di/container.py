# Standard library imports
from typing import Optional

# Local application imports
from ..domain.repositories.document_store import DocumentStore
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    BlogProvider,
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Document store (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depend on the store
    3. Use cases (BlogProvider, UserProvider, AuthProvider) - depend on repositories
    """

    def __init__(self, store: Optional[DocumentStore] = None) -> None:
        super().__init__()
        self.setup(store)

    def setup(self, store: Optional[DocumentStore] = None) -> None:
        """
        Setup dependency registrations by composing all providers.

        Args:
            store: Document store to wire in; MongoDB when omitted
        """
        DatabaseProvider.register(self, store)
        RepositoryProvider.register(self)
        BlogProvider.register(self)
        UserProvider.register(self)
        AuthProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container; None makes the next get_container build a fresh one"""
    global _container
    _container = container
