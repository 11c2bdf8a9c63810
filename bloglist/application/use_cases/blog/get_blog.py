# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse


class GetBlogUseCase:
    """Use case for getting a blog entry by ID"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(self, blog_id: str) -> BlogResponse:
        """
        Raises:
            NotFoundError: If the blog does not exist
        """
        entry = await self.blog_repository.get_by_id(blog_id)
        return BlogResponse.from_entry(entry)
