from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import List, Optional

class NotificationCreate(BaseModel):
    """One notification addressed to many recipients."""
    recipient_ids: List[str]
    type: str
    title: str
    body: str
    subject_id: Optional[str] = None
    subject_collection: Optional[str] = None

class Notification(BaseModel):
    """A notification as seen by one recipient."""
    id: str
    type: str
    title: str
    body: str
    subject_id: Optional[str] = None
    subject_collection: Optional[str] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
