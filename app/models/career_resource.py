from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class CareerResourceCategory(Base):
    __tablename__ = "career_resource_categories"

    id = Column(String(32), primary_key=True, default=generate_id)
    category_name = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    resources = relationship("CareerResource", back_populates="category")

class CareerResource(Base):
    __tablename__ = "career_resources"

    id = Column(String(32), primary_key=True, default=generate_id)
    question = Column(String(1000), nullable=False)
    answer = Column(Text, nullable=False)
    category_id = Column(String(32), ForeignKey("career_resource_categories.id", ondelete="SET NULL"), nullable=True, index=True)
    date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("CareerResourceCategory", back_populates="resources")
