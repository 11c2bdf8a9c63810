# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Response, status

# Local application imports
from ..application.dto.blog_dto import BlogCreateRequest, BlogUpdateRequest, BlogResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.blog.list_blogs import ListBlogsUseCase
from ..application.use_cases.blog.create_blog import CreateBlogUseCase
from ..application.use_cases.blog.get_blog import GetBlogUseCase
from ..application.use_cases.blog.update_blog import UpdateBlogUseCase
from ..application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ..domain.exceptions import NotFoundError, ValidationError
from ..di.container import get_container
from .dependencies import get_optional_user


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[BlogResponse])
async def list_blogs() -> List[BlogResponse]:
    """
    List all blogs

    Returns:
        List of BlogResponse objects with owners resolved
    """
    container = get_container()
    list_blogs_use_case = container.get(ListBlogsUseCase)

    return await list_blogs_use_case.execute()


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogCreateRequest,
    current_user: Optional[UserResponse] = Depends(get_optional_user),
) -> BlogResponse:
    """
    Create a new blog; the authenticated user, if any, becomes its owner

    Args:
        request: Blog creation request
        current_user: Acting user (from optional bearer token)

    Returns:
        BlogResponse with created blog information
    """
    container = get_container()
    create_blog_use_case = container.get(CreateBlogUseCase)

    try:
        return await create_blog_use_case.execute(
            request=request,
            owner_user_id=current_user.id if current_user else None,
        )
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str) -> BlogResponse:
    """
    Get a blog by ID

    Args:
        blog_id: ID of the blog

    Returns:
        BlogResponse with blog information
    """
    container = get_container()
    get_blog_use_case = container.get(GetBlogUseCase)

    try:
        return await get_blog_use_case.execute(blog_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, request: BlogUpdateRequest) -> BlogResponse:
    """
    Update the fields of a blog that the client sent

    Args:
        blog_id: ID of the blog
        request: Partial blog fields

    Returns:
        BlogResponse with the full updated blog
    """
    container = get_container()
    update_blog_use_case = container.get(UpdateBlogUseCase)

    try:
        return await update_blog_use_case.execute(blog_id, request)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str) -> Response:
    """
    Delete a blog. Deleting an id that does not exist also answers 204.

    Args:
        blog_id: ID of the blog
    """
    container = get_container()
    delete_blog_use_case = container.get(DeleteBlogUseCase)

    await delete_blog_use_case.execute(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
