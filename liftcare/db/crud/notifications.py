"""A user's own notifications."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import fetch_all
from liftcare.models import Notification
from liftcare.models.base import utcnow

NOTIFICATION_LIST_LIMIT = 50


async def list_notifications(db: AsyncSession, user_id: str) -> list[Notification]:
    stmt = (
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.sent_at.desc(), Notification.id.desc())
        .limit(NOTIFICATION_LIST_LIMIT)
    )
    return await fetch_all(db, stmt)


async def mark_read(db: AsyncSession, user_id: str, notification_id: str) -> bool:
    """Returns False when the notification does not exist or belongs to someone else."""
    result = await db.execute(
        update(Notification)
        .where(Notification.id == notification_id, Notification.user_id == user_id)
        .values(is_read=True, read_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount > 0


async def delete_notification(db: AsyncSession, user_id: str, notification_id: str) -> bool:
    result = await db.execute(
        delete(Notification)
        .where(Notification.id == notification_id, Notification.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount > 0
