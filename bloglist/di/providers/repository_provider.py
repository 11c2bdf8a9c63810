from typing import TYPE_CHECKING
from ...core.security import hash_password
from ...domain.repositories.document_store import DocumentStore
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.repositories.user_registry import UserRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - builds repositories over the registered store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        store = container.get(DocumentStore)

        container.register_singleton(BlogRepository, BlogRepository(store=store))
        container.register_singleton(
            UserRegistry,
            UserRegistry(store=store, password_hasher=hash_password),
        )
