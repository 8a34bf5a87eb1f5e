from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, Integer, Text, Float, ForeignKey, Index
from sqlalchemy.orm import relationship

from me_portal.core.database import Base
from me_portal.models.progress import ProgressStatus, TracksProgress


class Project(TracksProgress, Base):
    """Project delivering against a strategic objective"""
    __tablename__ = "projects"

    __table_args__ = (
        Index('ix_projects_strategic_objective_id', 'strategic_objective_id'),
        Index('ix_projects_responsible_team_id', 'responsible_team_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    objective = Column(Text, nullable=False)
    strategic_objective_id = Column(Integer, ForeignKey("strategic_objectives.id"), nullable=False)
    outcome = Column(Text, nullable=False)
    activity = Column(Text, nullable=False)
    kpi = Column(Text, nullable=False)
    target_value = Column(Float, nullable=False)
    actual_value = Column(Float, nullable=False, default=0)
    status = Column(SQLEnum(ProgressStatus), nullable=False)
    responsible_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    timeline = Column(String(255), nullable=False)
    last_updated = Column(DateTime(timezone=True), nullable=False)

    strategic_objective = relationship("StrategicObjective", back_populates="projects")
    responsible_team = relationship("Team", back_populates="projects")
    livelihoods = relationship("Livelihood", back_populates="project")
    workshops = relationship("Workshop", back_populates="project")

    def __repr__(self):
        return f"<Project {self.name}>"
