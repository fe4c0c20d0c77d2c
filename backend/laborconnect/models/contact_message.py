"""
Contact form submission model
"""
from sqlalchemy import Column, String, Text
from ..core.database import Base, UTCDateTime


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<ContactMessage(id={self.id}, subject={self.subject})>"
