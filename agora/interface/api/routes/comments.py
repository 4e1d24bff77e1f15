"""Discussion comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from agora.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRevisionHistoryRequest,
    GetRevisionHistoryResponse,
    GetRevisionHistoryUseCase,
)
from agora.domain.error import AccessFailureError, NotFoundError
from agora.domain.value import Viewer

router = APIRouter(prefix="/discussions", tags=["comments"], route_class=DishkaRoute)


@router.get(
    "/{group_id}/{topic_id}/comments",
    response_model=GetCommentsResponse,
)
async def get_comments(
    group_id: int,
    topic_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    viewer: str | None = None,
    nullifier: list[str] = Query(default=[]),
    is_admin: bool = False,
    has_membership: bool = False,
) -> GetCommentsResponse:
    """Get a discussion as an anonymized reply tree.

    Viewer parameters are optional; without any of them the response
    carries no permissions. ``is_admin`` is trusted as sent.

    Args:
        group_id: Group owning the discussion
        topic_id: Topic within the group
        get_comments_use_case: Get comments use case from DI
        viewer: Viewer's public key
        nullifier: Nullifiers the viewer owns (repeatable)
        is_admin: Whether the viewer administers the group
        has_membership: Whether the viewer may reply

    Returns:
        Nested comments with member numbers

    Raises:
        HTTPException: 502 if the comment index is unavailable
    """
    has_viewer = viewer is not None or nullifier or is_admin or has_membership
    request = GetCommentsRequest(
        group_id=group_id,
        topic_id=topic_id,
        viewer=(
            Viewer(
                public_key=viewer,
                nullifiers=frozenset(nullifier),
                is_admin=is_admin,
                has_membership=has_membership,
            )
            if has_viewer
            else None
        ),
    )
    try:
        return await get_comments_use_case.execute(request)
    except AccessFailureError as e:
        logfire.warn(
            "Comments unavailable",
            group_id=group_id,
            topic_id=topic_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Comment index unavailable, please retry",
        )


@router.get(
    "/{group_id}/{topic_id}/comments/{comment_id}/revisions",
    response_model=GetRevisionHistoryResponse,
)
async def get_revision_history(
    group_id: int,
    topic_id: int,
    comment_id: int,
    get_revision_history_use_case: FromDishka[GetRevisionHistoryUseCase],
) -> GetRevisionHistoryResponse:
    """Get one comment's revision history, oldest first.

    Args:
        group_id: Group owning the discussion
        topic_id: Topic within the group
        comment_id: Comment ID
        get_revision_history_use_case: Get revision history use case from DI

    Returns:
        Ordered revisions and the default selected index

    Raises:
        HTTPException: 404 if the comment doesn't exist, 502 if the index is unavailable
    """
    request = GetRevisionHistoryRequest(
        group_id=group_id, topic_id=topic_id, comment_id=comment_id
    )
    try:
        return await get_revision_history_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessFailureError as e:
        logfire.warn(
            "Revision history unavailable",
            group_id=group_id,
            topic_id=topic_id,
            comment_id=comment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Comment index unavailable, please retry",
        )
