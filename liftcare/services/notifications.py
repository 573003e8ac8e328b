"""In-app notifications raised by elevator state changes."""

from __future__ import annotations

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.models import Elevator, Notification

logger = logging.getLogger(__name__)

ELEVATOR_STATE_TYPE = "elevator_state"
IN_APP = "in_app"

# Only these transitions notify; anything else (fault -> fault included) is silent
NOTIFYING_TRANSITIONS = {
    ("normal", "fault"): "Elevator {id} changed to fault",
    ("fault", "normal"): "Elevator {id} returned to normal",
}


def elevator_tag(elevator_id: str) -> str:
    return f"elevator:{elevator_id}"


def state_change_title(elevator_id: str, old_state: str, new_state: str) -> str | None:
    template = NOTIFYING_TRANSITIONS.get((old_state, new_state))
    return template.format(id=elevator_id) if template else None


async def notify_elevator_state(
    db: AsyncSession, user_id: str, elevator: Elevator, old_state: str, new_state: str,
) -> Notification | None:
    """Replace the actor's notification for this elevator with one describing the new state.

    Runs inside the caller's transaction and does not commit. Returns the new
    notification, or None when the transition is not one that notifies.
    """
    title = state_change_title(elevator.id, old_state, new_state)
    if title is None:
        return None

    tag = elevator_tag(elevator.id)
    await db.execute(
        delete(Notification).where(
            Notification.user_id == user_id,
            Notification.type == ELEVATOR_STATE_TYPE,
            Notification.tag == tag,
        )
    )

    notification = Notification(
        user_id=user_id,
        type=ELEVATOR_STATE_TYPE,
        channel=IN_APP,
        tag=tag,
        title=title,
        body=f"{elevator.name}: {old_state} -> {new_state}",
    )
    db.add(notification)
    logger.info("Elevator %s %s -> %s, notified user %s", elevator.id, old_state, new_state, user_id)
    return notification
