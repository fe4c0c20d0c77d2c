"""
User model for workers and employers
"""
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
import enum
from ..core.database import Base, UTCDateTime


class UserRole(str, enum.Enum):
    """User role enumeration"""
    WORKER = "worker"
    EMPLOYER = "employer"


class User(Base):
    """Registered marketplace account"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)
    created_at = Column(UTCDateTime, nullable=False)

    # Relationships
    worker_profile = relationship("WorkerProfile", back_populates="user", uselist=False)
    employer_profile = relationship("EmployerProfile", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
