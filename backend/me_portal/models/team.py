from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship

from me_portal.core.database import Base


class Team(Base):
    """Team responsible for objectives and projects"""
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    strategic_objectives = relationship("StrategicObjective", back_populates="responsible_team")
    projects = relationship("Project", back_populates="responsible_team")

    def __repr__(self):
        return f"<Team {self.name}>"
