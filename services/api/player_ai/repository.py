"""Storage boundary for performance records.

The orchestrator and the analytics layer only talk to storage through
`PerformanceRepository`, which wraps a SQLAlchemy session. Each write commits
immediately so a retrain that follows the write reads the committed dataset.
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session

from .models import PlayerPerformance


class PerformanceRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[PlayerPerformance]:
        """Return every record ordered by id (insertion order)."""
        return list(self.db.scalars(select(PlayerPerformance).order_by(PlayerPerformance.id)))

    def find_by_id(self, record_id: int) -> PlayerPerformance | None:
        return self.db.get(PlayerPerformance, record_id)

    def save(self, record: PlayerPerformance) -> PlayerPerformance:
        """Insert or update `record`; the id is assigned on first save."""
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def exists_by_id(self, record_id: int) -> bool:
        return bool(self.db.scalar(select(exists().where(PlayerPerformance.id == record_id))))

    def delete_by_id(self, record_id: int) -> None:
        self.db.execute(delete(PlayerPerformance).where(PlayerPerformance.id == record_id))
        self.db.commit()
