from datetime import datetime, timezone
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple

from app.models.notification import Notification, NotificationRecipient
from app.schemas.notification import NotificationCreate

class CRUDNotification:
    """Fan-out notifications: one notification row, one recipient row per user."""

    def create_multi(self, db: Session, *, obj_in: NotificationCreate) -> Notification:
        notification = Notification(
            type=obj_in.type,
            title=obj_in.title,
            body=obj_in.body,
            subject_id=obj_in.subject_id,
            subject_collection=obj_in.subject_collection,
        )
        notification.recipients = [
            NotificationRecipient(user_id=user_id) for user_id in dict.fromkeys(obj_in.recipient_ids)
        ]
        db.add(notification)
        db.commit()
        db.refresh(notification)
        return notification

    def _for_user(self, db: Session, user_id: str):
        return (
            db.query(Notification, NotificationRecipient)
            .join(NotificationRecipient, NotificationRecipient.notification_id == Notification.id)
            .filter(NotificationRecipient.user_id == user_id)
        )

    def get_for_user(self, db: Session, *, user_id: str, skip: int = 0, limit: int = 100) -> List[Tuple[Notification, NotificationRecipient]]:
        return (
            self._for_user(db, user_id)
            .order_by(Notification.created_at.desc(), Notification.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_unread_count(self, db: Session, *, user_id: str) -> int:
        return self._for_user(db, user_id).filter(NotificationRecipient.is_read == False).count()

    def get_recipient(self, db: Session, *, notification_id: str, user_id: str) -> Optional[NotificationRecipient]:
        return db.query(NotificationRecipient).filter(
            NotificationRecipient.notification_id == notification_id,
            NotificationRecipient.user_id == user_id,
        ).first()

    def mark_as_read(self, db: Session, *, recipient: NotificationRecipient) -> NotificationRecipient:
        if not recipient.is_read:
            recipient.is_read = True
            recipient.read_at = datetime.now(timezone.utc)
            db.add(recipient)
            db.commit()
            db.refresh(recipient)
        return recipient

    def mark_all_as_read(self, db: Session, *, user_id: str) -> int:
        updated = db.query(NotificationRecipient).filter(
            NotificationRecipient.user_id == user_id, NotificationRecipient.is_read == False
        ).update({"is_read": True, "read_at": datetime.now(timezone.utc)})
        db.commit()
        return updated

notification = CRUDNotification()
