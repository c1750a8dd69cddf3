"""API data models.

One table backs the service: `player_performance`, a row per player with the
five performance metrics and the ground-truth suitability label used as the
classifier's training signal.
"""

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class PlayerPerformance(Base):
    __tablename__ = "player_performance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    strike_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    bowling_average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    economy_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    fielding_stats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 1 = suitable, 0 = not suitable
    label: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"PlayerPerformance(id={self.id}, average={self.average}, strike_rate={self.strike_rate}, "
            f"bowling_average={self.bowling_average}, economy_rate={self.economy_rate}, "
            f"fielding_stats={self.fielding_stats}, label={self.label})"
        )
