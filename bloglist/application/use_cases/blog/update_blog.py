# Standard library imports
from typing import Any, Mapping, Union

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogUpdateRequest, BlogResponse


class UpdateBlogUseCase:
    """Use case for partially updating a blog entry"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(
        self,
        blog_id: str,
        patch: Union[BlogUpdateRequest, Mapping[str, Any]],
    ) -> BlogResponse:
        """
        Apply only the fields present in ``patch``

        Args:
            blog_id: ID of the blog to update
            patch: Fields to change; for a DTO, only fields the client set

        Returns:
            BlogResponse with the full updated entry

        Raises:
            NotFoundError: If the blog does not exist
            ValidationError: If a supplied field is malformed
        """
        if isinstance(patch, BlogUpdateRequest):
            fields = patch.model_dump(exclude_unset=True)
        else:
            fields = dict(patch)

        entry = await self.blog_repository.update(blog_id, fields)
        return BlogResponse.from_entry(entry)
