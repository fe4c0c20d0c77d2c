"""
Role-specific profile models
"""
from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..core.database import Base


class WorkerProfile(Base):
    """Skills and availability of a worker"""
    __tablename__ = "worker_profiles"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    skills = Column(Text, nullable=False)
    experience = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    availability = Column(String(50), default="Available Now", nullable=False)  # Available Now, This Week, This Month
    description = Column(Text, nullable=True)
    hourly_rate = Column(String(50), nullable=True)

    # Relationships
    user = relationship("User", back_populates="worker_profile")

    def __repr__(self):
        return f"<WorkerProfile(id={self.id}, user_id={self.user_id})>"


class EmployerProfile(Base):
    """Company details of an employer"""
    __tablename__ = "employer_profiles"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company_name = Column(String(255), nullable=False)
    industry = Column(String(255), nullable=False)
    job_needs = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)

    # Relationships
    user = relationship("User", back_populates="employer_profile")

    def __repr__(self):
        return f"<EmployerProfile(id={self.id}, company_name={self.company_name})>"
