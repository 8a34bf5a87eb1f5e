from sqlalchemy import Column, String, Enum as SQLEnum, Integer, Text, Float, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum

from me_portal.core.database import Base


class DisaggregatedSex(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class AgeGroup(str, enum.Enum):
    """Participant age buckets used in disaggregated reporting"""
    GROUP_18_29 = "GROUP_18_29"
    GROUP_30_44 = "GROUP_30_44"
    GROUP_45_54 = "GROUP_45_54"
    GROUP_55_64 = "GROUP_55_64"
    GROUP_65_PLUS = "GROUP_65_PLUS"

    @property
    def label(self) -> str:
        return AGE_GROUP_LABELS[self]


AGE_GROUP_LABELS = {
    AgeGroup.GROUP_18_29: "18-29",
    AgeGroup.GROUP_30_44: "30-44",
    AgeGroup.GROUP_45_54: "45-54",
    AgeGroup.GROUP_55_64: "55-64",
    AgeGroup.GROUP_65_PLUS: "65+",
}


class Livelihood(Base):
    """Livelihood grant paid to a participant under a project"""
    __tablename__ = "livelihoods"

    __table_args__ = (
        Index('ix_livelihoods_project_id', 'project_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    participant_name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    disaggregated_sex = Column(SQLEnum(DisaggregatedSex), nullable=False)
    disability = Column(Boolean, nullable=False, default=False)
    age_group = Column(SQLEnum(AgeGroup), nullable=False)
    grant_amount_received = Column(Float, nullable=False)
    purpose = Column(Text, nullable=False)
    progress1 = Column(Text, nullable=False)
    progress2 = Column(Text, nullable=False)
    outcome = Column(Text, nullable=False)
    subsequent_grant_amount = Column(Float, nullable=False, default=0)

    project = relationship("Project", back_populates="livelihoods")

    def __repr__(self):
        return f"<Livelihood {self.participant_name}>"
