from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError
from liftcare.schemas import MessageResponse, NotificationRead
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationRead])
async def list_notifications(
    auth: AuthContext = Depends(guard("notifications", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_notifications(db, auth.user_id)


@router.post("/{notification_id}/read", response_model=MessageResponse)
async def mark_notification_read(
    notification_id: str,
    auth: AuthContext = Depends(guard("notifications", "mark_read")),
    db: AsyncSession = Depends(get_db),
):
    if not await crud.mark_read(db, auth.user_id, notification_id):
        raise NotFoundError("Notification not found")
    return MessageResponse(message="ok")


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: str,
    auth: AuthContext = Depends(guard("notifications", "delete")),
    db: AsyncSession = Depends(get_db),
):
    if not await crud.delete_notification(db, auth.user_id, notification_id):
        raise NotFoundError("Notification not found")
    return MessageResponse(message="deleted")
