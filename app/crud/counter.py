from sqlalchemy import update
from sqlalchemy.orm import Session

from app.models.counter import Counter


class CRUDCounter:
    """Named sequences backed by one row each; increments are done in SQL."""

    def next_value(self, db: Session, *, name: str) -> int:
        result = db.execute(
            update(Counter).where(Counter.name == name).values(seq=Counter.seq + 1)
        )
        if result.rowcount == 0:
            db.add(Counter(name=name, seq=1))
            db.flush()
            return 1
        return db.query(Counter.seq).filter(Counter.name == name).scalar()


counter = CRUDCounter()
