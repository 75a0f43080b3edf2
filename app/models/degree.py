from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class Degree(Base):
    __tablename__ = "degrees"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False, index=True)
    degree = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=False)
    duration = Column(String(100), nullable=False)
    level = Column(String(100), nullable=False)
    subject = Column(String(255), nullable=False)
    link = Column(String, nullable=False)
    img = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
