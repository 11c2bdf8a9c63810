"""
Unit tests for the DI container wiring.
"""
import pytest

from bloglist.application.use_cases.blog.create_blog import CreateBlogUseCase
from bloglist.application.use_cases.user.register_user import RegisterUserUseCase
from bloglist.di.base_container import BaseContainer
from bloglist.di.container import DIContainer
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.document_store import DocumentStore
from bloglist.domain.repositories.user_registry import UserRegistry


class TestBaseContainer:

    def test_singleton_returned_as_is(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_called_per_get(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_missing_key_raises(self):
        with pytest.raises(ValueError, match="DocumentStore"):
            BaseContainer().get(DocumentStore)


class TestDIContainer:

    def test_injected_store_reaches_repositories(self, store):
        container = DIContainer(store=store)
        assert container.get(DocumentStore) is store
        assert container.get(BlogRepository).store is store
        assert container.get(UserRegistry).store is store

    def test_use_cases_share_repositories(self, store):
        container = DIContainer(store=store)
        create = container.get(CreateBlogUseCase)
        register = container.get(RegisterUserUseCase)
        assert create.blog_repository is container.get(BlogRepository)
        assert register.user_registry is container.get(UserRegistry)
        assert container.get(CreateBlogUseCase) is not create
