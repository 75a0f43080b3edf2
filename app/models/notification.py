from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(32), primary_key=True, default=generate_id)
    type = Column(String, nullable=False, index=True)  # e.g. 'system', 'review'
    title = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    subject_id = Column(String(32), nullable=True)
    subject_collection = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    recipients = relationship("NotificationRecipient", back_populates="notification", cascade="all, delete-orphan")

class NotificationRecipient(Base):
    """Per-recipient read state of a fan-out notification."""
    __tablename__ = "notification_recipients"

    notification_id = Column(String(32), ForeignKey("notifications.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(String(32), ForeignKey("users.id"), primary_key=True, index=True)
    is_read = Column(Boolean, nullable=False, default=False)
    read_at = Column(DateTime(timezone=True), nullable=True)

    notification = relationship("Notification", back_populates="recipients")
