from sqlalchemy import Column, Integer, String
from app.core.database import Base

class Counter(Base):
    """Named monotonically increasing sequences (e.g. public course ids)."""
    __tablename__ = "counters"

    name = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False, default=0)
