"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from tracker.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from tracker.domain.error import (
    InvalidParentError,
    NotFoundError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
)
from tracker.domain.service import JWTService
from tracker.domain.value import CommentOrder

router = APIRouter(prefix="/torrents", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Length bounds are enforced by the comment service so that empty and
    over-long content both come back as 400.
    """

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{torrent_id}/comments", response_model=GetCommentTreeResponse)
async def get_comments(
    torrent_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    order: CommentOrder | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentTreeResponse:
    """Get one page of root comments with their full reply trees.

    Authentication is optional; it only fills in the viewer's own votes.

    Args:
        torrent_id: Torrent UUID
        get_comment_tree_use_case: Get comment tree use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based root page
        limit: Roots per page (server default when omitted)
        order: Root ordering by creation time, asc or desc
        auth_token: JWT token from cookie (optional)

    Returns:
        Comment trees with pagination totals

    Raises:
        HTTPException: If the torrent is unknown or paging is out of range
    """
    viewer_id = jwt_service.get_viewer_id(auth_token)

    try:
        request = GetCommentTreeRequest(
            torrent_id=torrent_id,
            page=page,
            page_size=limit,
            order=order,
            viewer_id=str(viewer_id) if viewer_id else None,
        )
        return await get_comment_tree_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/{torrent_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    torrent_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a torrent or reply to another comment.

    Requires authentication.

    Args:
        torrent_id: Torrent UUID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, not allowed, or validation fails
    """
    author_id = jwt_service.get_viewer_id(auth_token)

    try:
        use_case_request = CreateCommentRequest(
            torrent_id=torrent_id,
            author_id=str(author_id) if author_id else None,
            content=request.content,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except PermissionDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (InvalidParentError, ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
