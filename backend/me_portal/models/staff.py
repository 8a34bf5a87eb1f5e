from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, Integer
from datetime import datetime
import enum

from me_portal.core.database import Base


class StaffRole(str, enum.Enum):
    """Staff roles. Only ADMIN carries write privileges."""
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class Staff(Base):
    """Staff member who can sign in"""
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash

    role = Column(SQLEnum(StaffRole), default=StaffRole.STAFF, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Staff {self.email}>"
