import logging
from typing import Callable, Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from app.core.constants import NotificationTypeEnum
from app.core.exceptions import NotFoundError
from app.crud.notification import notification as crud_notification
from app.models.notification import Notification as NotificationModel
from app.realtime.server_context import RealtimeContext
from app.schemas.notification import NotificationCreate, Notification

logger = logging.getLogger(__name__)


class NotificationService:

    def create_multi_recipient_notification(
        self,
        db: Session,
        *,
        recipient_ids: Iterable[str],
        type: str,
        title: str,
        body: str,
        subject_id: Optional[str] = None,
        subject_collection: Optional[str] = None,
    ) -> NotificationModel:
        """Persist one notification addressed to every id in ``recipient_ids``.

        Store errors propagate to the caller.
        """
        notification_in = NotificationCreate(
            recipient_ids=[str(r) for r in recipient_ids],
            type=type,
            title=title,
            body=body,
            subject_id=subject_id,
            subject_collection=subject_collection,
        )
        return crud_notification.create_multi(db, obj_in=notification_in)

    async def fan_out(
        self,
        db: Session,
        *,
        recipients: Callable[[Session], List[str]],
        title: str,
        body: Union[str, Callable[[], str]],
        subject_id: Optional[str] = None,
        subject_collection: Optional[str] = None,
        type: str = NotificationTypeEnum.SYSTEM.value,
        realtime: Optional[RealtimeContext] = None,
    ) -> Optional[NotificationModel]:
        """Best-effort delivery used after a committed write.

        ``recipients`` is called with ``db`` and ``body`` may be a callable;
        both are evaluated here. Never raises: a failure is rolled back and
        logged so the write that triggered it still succeeds.
        """
        try:
            recipient_ids = recipients(db)
            if not recipient_ids:
                logger.info(f"No recipients for notification '{title}'")
                return None
            notification = self.create_multi_recipient_notification(
                db,
                recipient_ids=recipient_ids,
                type=type,
                title=title,
                body=body() if callable(body) else body,
                subject_id=subject_id,
                subject_collection=subject_collection,
            )
        except Exception as e:
            db.rollback()
            logger.error(
                f"Notification '{title}' for {subject_collection}:{subject_id} was not delivered: {e}",
                exc_info=True,
            )
            return None

        logger.info(f"Notification sent to {len(recipient_ids)} users: {title}")

        if realtime is not None:
            payload = {
                "id": notification.id,
                "type": notification.type,
                "title": notification.title,
                "body": notification.body,
                "subject_id": notification.subject_id,
                "subject_collection": notification.subject_collection,
                "created_at": notification.created_at,
            }
            try:
                await realtime.emit_to_users(recipient_ids, "notification", payload)
            except Exception as e:
                logger.error(f"Realtime push for notification {notification.id} failed: {e}")

        return notification

    @staticmethod
    def _recipient_view(n: NotificationModel, recipient) -> Notification:
        return Notification(
            id=n.id,
            type=n.type,
            title=n.title,
            body=n.body,
            subject_id=n.subject_id,
            subject_collection=n.subject_collection,
            is_read=recipient.is_read,
            read_at=recipient.read_at,
            created_at=n.created_at,
        )

    def get_user_notifications(self, db: Session, *, user_id: str, skip: int = 0, limit: int = 100) -> List[Notification]:
        rows = crud_notification.get_for_user(db, user_id=user_id, skip=skip, limit=limit)
        return [self._recipient_view(n, r) for n, r in rows]

    def get_unread_count(self, db: Session, *, user_id: str) -> int:
        return crud_notification.get_unread_count(db, user_id=user_id)

    def mark_notification_as_read(self, db: Session, *, notification_id: str, user_id: str) -> Notification:
        recipient = crud_notification.get_recipient(db, notification_id=notification_id, user_id=user_id)
        if not recipient:
            raise NotFoundError("Notification not found")
        recipient = crud_notification.mark_as_read(db, recipient=recipient)
        return self._recipient_view(recipient.notification, recipient)

    def mark_all_notifications_as_read(self, db: Session, *, user_id: str) -> int:
        return crud_notification.mark_all_as_read(db, user_id=user_id)

notification_service = NotificationService()
