from sqlalchemy import Column, Enum as SQLEnum, Integer, Text, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship

from me_portal.core.database import Base
from me_portal.models.livelihood import AgeGroup, DisaggregatedSex


class Workshop(Base):
    """Workshop run under a project, with partner evaluation notes"""
    __tablename__ = "workshops"

    __table_args__ = (
        Index('ix_workshops_project_id', 'project_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    num_participants = Column(Integer, nullable=False, default=0)
    disaggregated_sex = Column(SQLEnum(DisaggregatedSex), nullable=False)
    disability = Column(Boolean, nullable=False, default=False)
    age_group = Column(SQLEnum(AgeGroup), nullable=False)
    pre_evaluation = Column(Text, nullable=False)
    post_evaluation = Column(Text, nullable=False)
    local_partner = Column(Text, nullable=False)
    local_partner_responsibility = Column(Text, nullable=False)
    success_of_partnership = Column(Text, nullable=False)
    challenges = Column(Text, nullable=False)
    strengths = Column(Text, nullable=False)
    outcomes = Column(Text, nullable=False)
    recommendations = Column(Text, nullable=False)

    project = relationship("Project", back_populates="workshops")

    def __repr__(self):
        return f"<Workshop project={self.project_id}>"
