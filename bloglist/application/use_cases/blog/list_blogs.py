# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse


class ListBlogsUseCase:
    """Use case for listing every blog entry"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(self) -> List[BlogResponse]:
        entries = await self.blog_repository.list_all()
        return [BlogResponse.from_entry(entry) for entry in entries]
