"""
Memory persistence and access rules.

The service receives its SQLAlchemy session from the caller, so routes get it
through FastAPI dependencies and tests can hand it any engine.
"""
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from spacetime.exceptions import MemoryAccessDeniedError, MemoryNotFoundError
from spacetime.models.memory import Memory
from spacetime.schemas.memory import MemoryBody
from spacetime.spacetime_logger import logger

# Length of the excerpt shown in memory listings, before the "..." suffix
EXCERPT_LENGTH = 115


def excerpt(content: str) -> str:
    """Shorten content for listings. The suffix is always added, even to short content."""
    return content[:EXCERPT_LENGTH] + "..."


class MemoryService:
    def __init__(self, db: Session, enforce_ownership: bool = True):
        self.db = db
        self.enforce_ownership = enforce_ownership

    def list_memories(self, user_id: str) -> List[dict]:
        """
        List memories oldest first as ``{id, cover_url, content}`` excerpts.

        Only the caller's own memories are listed when ownership is enforced.
        """
        query = self.db.query(Memory)
        if self.enforce_ownership:
            query = query.filter(Memory.user_id == user_id)
        memories = query.order_by(Memory.created_at.asc()).all()

        return [
            {
                "id": memory.id,
                "cover_url": memory.cover_url,
                "content": excerpt(memory.content),
            }
            for memory in memories
        ]

    def find_memory(self, memory_id: uuid.UUID) -> Optional[Memory]:
        return self.db.query(Memory).filter(Memory.id == memory_id).first()

    def _require_memory(self, memory_id: uuid.UUID) -> Memory:
        memory = self.find_memory(memory_id)
        if memory is None:
            raise MemoryNotFoundError()
        return memory

    def _check_owner(self, memory: Memory, user_id: str, action: str) -> None:
        if self.enforce_ownership and memory.user_id != user_id:
            logger.warning(f"User {user_id} denied {action} on memory {memory.id}")
            raise MemoryAccessDeniedError(f"You don't have permission to {action} this memory")

    def get_memory(self, memory_id: uuid.UUID, user_id: str) -> Memory:
        memory = self._require_memory(memory_id)
        if not memory.is_public:
            self._check_owner(memory, user_id, "access")
        return memory

    def create_memory(self, body: MemoryBody, user_id: str) -> Memory:
        memory = Memory(
            content=body.content,
            cover_url=body.cover_url,
            is_public=body.is_public,
            user_id=user_id,
        )
        self.db.add(memory)
        self._commit()
        self.db.refresh(memory)
        logger.info(f"Memory {memory.id} created by {user_id}")
        return memory

    def update_memory(self, memory_id: uuid.UUID, body: MemoryBody, user_id: str) -> Memory:
        memory = self._require_memory(memory_id)
        self._check_owner(memory, user_id, "update")

        memory.content = body.content
        memory.cover_url = body.cover_url
        memory.is_public = body.is_public
        self._commit()
        self.db.refresh(memory)
        logger.info(f"Memory {memory.id} updated by {user_id}")
        return memory

    def delete_memory(self, memory_id: uuid.UUID, user_id: str) -> None:
        memory = self._require_memory(memory_id)
        self._check_owner(memory, user_id, "delete")

        self.db.delete(memory)
        self._commit()
        logger.info(f"Memory {memory_id} deleted by {user_id}")

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
