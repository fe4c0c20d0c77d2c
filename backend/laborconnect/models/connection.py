"""
Connection model linking an employer to a worker
"""
from sqlalchemy import Column, String, Enum, ForeignKey
import enum
from ..core.database import Base, UTCDateTime


class ConnectionStatus(str, enum.Enum):
    """Connection status enumeration"""
    CONNECTED = "connected"
    HIRED = "hired"


class Connection(Base):
    """Contact or hire intent between an employer and a worker"""
    __tablename__ = "connections"

    id = Column(String(36), primary_key=True, index=True)
    employer_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    worker_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        Enum(ConnectionStatus, values_callable=lambda e: [m.value for m in e]),
        default=ConnectionStatus.CONNECTED,
        nullable=False
    )
    last_project = Column(String(255), nullable=True)
    created_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Connection(id={self.id}, employer_id={self.employer_id}, worker_id={self.worker_id}, status={self.status})>"
