"""Role-upgrade requests, enriched with the requesting user and their verification documents."""

from sqlalchemy.orm import Session, selectinload

from offbase_admin.models import RoleUpgradeRequest, User
from offbase_admin.schemas.role_requests import (
    RequestingUser,
    RoleRequestItem,
    RoleRequestsResponse,
)
from offbase_admin.services.properties import page_bounds, total_pages

ROLE_REQUESTS_PAGE_SIZE = 10


def list_role_requests(db: Session, page: int = 1, status_filter: str = "ALL") -> RoleRequestsResponse:
    """One page of requests, newest first. status_filter 'ALL' disables filtering."""
    query = db.query(RoleUpgradeRequest)
    if status_filter != "ALL":
        query = query.filter(RoleUpgradeRequest.status == status_filter)
    count = query.count()
    offset, limit = page_bounds(page, ROLE_REQUESTS_PAGE_SIZE)
    requests = (
        query.order_by(RoleUpgradeRequest.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )

    users_by_id: dict[str, User] = {}
    user_ids = sorted({r.user_id for r in requests if r.user_id})
    if user_ids:
        users = (
            db.query(User)
            .options(selectinload(User.documents))
            .filter(User.id.in_(user_ids))
            .all()
        )
        users_by_id = {u.id: u for u in users}

    items = []
    for r in requests:
        user = users_by_id.get(r.user_id)
        items.append(
            RoleRequestItem(
                id=r.id,
                user_id=r.user_id,
                requested_role=r.requested_role,
                status=r.status,
                created_at=r.created_at,
                user=RequestingUser.model_validate(user) if user is not None else None,
            )
        )
    return RoleRequestsResponse(
        data=items,
        count=count,
        page=max(page, 1),
        total_pages=total_pages(count, ROLE_REQUESTS_PAGE_SIZE),
    )
