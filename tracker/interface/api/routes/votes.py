"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from tracker.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from tracker.domain.error import NotFoundError, UnauthenticatedError
from tracker.domain.service import JWTService

router = APIRouter(prefix="/torrents", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment.

    ``direction`` is validated by the use case so unknown values are a 400.
    """

    direction: str


@router.post(
    "/{torrent_id}/comments/{comment_id}/vote", response_model=CastVoteResponse
)
async def vote_on_comment(
    torrent_id: str,
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote up or down on a comment.

    Repeating the current vote retracts it; voting the other way switches
    it. Requires authentication.

    Args:
        torrent_id: Torrent UUID
        comment_id: Comment UUID
        request: Requested vote direction ("up" or "down")
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Refreshed vote totals and the caller's vote state

    Raises:
        HTTPException: If not authenticated, comment not found, or bad direction
    """
    voter_id = jwt_service.get_viewer_id(auth_token)
    if not voter_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        use_case_request = CastVoteRequest(
            torrent_id=torrent_id,
            comment_id=comment_id,
            voter_id=str(voter_id),
            direction=request.direction,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
