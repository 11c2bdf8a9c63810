from typing import TYPE_CHECKING
from ...domain.repositories.blog_repository import BlogRepository
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.get_blog import GetBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BlogProvider:
    """Blog use case provider - registers all blog-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all blog use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            ListBlogsUseCase,
            CreateBlogUseCase,
            GetBlogUseCase,
            UpdateBlogUseCase,
            DeleteBlogUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    blog_repository=container.get(BlogRepository)
                )
            )
