from sqlalchemy import Column, String, Text, Boolean, DateTime, Uuid
from spacetime.database import Base
from datetime import datetime, timezone
import uuid


def utcnow():
    return datetime.now(timezone.utc)


class Memory(Base):
    __tablename__ = "memories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    content = Column(Text, nullable=False)
    cover_url = Column(Text, nullable=False)
    is_public = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
