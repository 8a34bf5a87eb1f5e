from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, Integer, Text, Float, ForeignKey, Index
from sqlalchemy.orm import relationship

from me_portal.core.database import Base
from me_portal.models.progress import ProgressStatus, TracksProgress


class StrategicObjective(TracksProgress, Base):
    """Top-level organizational goal tracked against a KPI target"""
    __tablename__ = "strategic_objectives"

    __table_args__ = (
        Index('ix_strategic_objectives_team_id', 'team_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    outcome = Column(Text, nullable=False)
    kpi = Column(Text, nullable=False)
    target_value = Column(Float, nullable=False)
    actual_value = Column(Float, nullable=False, default=0)
    status = Column(SQLEnum(ProgressStatus), nullable=False)

    # Not checked for existence before insert
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    last_updated = Column(DateTime(timezone=True), nullable=False)

    responsible_team = relationship("Team", back_populates="strategic_objectives")
    projects = relationship("Project", back_populates="strategic_objective")

    def __repr__(self):
        return f"<StrategicObjective {self.name}>"
