# Standard library imports
from typing import Any, Mapping, Optional, Union

# Local application imports
from ....domain.constants import BlogFields
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogCreateRequest, BlogResponse


class CreateBlogUseCase:
    """Use case for creating a blog entry"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(
        self,
        request: Union[BlogCreateRequest, Mapping[str, Any]],
        owner_user_id: Optional[str] = None,
    ) -> BlogResponse:
        """
        Create a new blog entry

        Args:
            request: Blog fields, as a DTO or a plain mapping
            owner_user_id: ID of the acting user, recorded as owner when known

        Returns:
            BlogResponse with the store-assigned id

        Raises:
            ValidationError: If title or url is missing or likes is malformed
        """
        if isinstance(request, BlogCreateRequest):
            data = request.model_dump()
        else:
            data = dict(request)

        # Client-supplied identity is never honored
        data = {k: v for k, v in data.items() if k not in BlogFields.IDENTIFIER_FIELDS}

        entry = await self.blog_repository.create(data, acting_owner=owner_user_id)
        return BlogResponse.from_entry(entry)
