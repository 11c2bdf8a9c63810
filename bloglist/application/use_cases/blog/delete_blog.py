# Local application imports
from ....domain.repositories.blog_repository import BlogRepository


class DeleteBlogUseCase:
    """Use case for deleting a blog entry"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(self, blog_id: str) -> bool:
        """
        Delete a blog entry

        Returns:
            True if an entry was removed, False if there was nothing to remove
        """
        return await self.blog_repository.delete(blog_id)
