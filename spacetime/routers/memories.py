from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import uuid
from spacetime.auth import get_current_user_id
from spacetime.config import settings
from spacetime.database import get_db
from spacetime.schemas.memory import MemoryBody, MemoryOut, MemorySummary, MessageOut
from spacetime.services.memory_service import MemoryService

router = APIRouter(prefix="/memories", tags=["Memories"])


def get_memory_service(db: Session = Depends(get_db)) -> MemoryService:
    return MemoryService(db, enforce_ownership=settings.AUTH_ENABLED)


@router.get("", response_model=List[MemorySummary])
def list_memories(
    user_id: str = Depends(get_current_user_id),
    service: MemoryService = Depends(get_memory_service),
):
    return service.list_memories(user_id)


@router.get("/{memory_id}", response_model=MemoryOut)
def get_memory(
    memory_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    service: MemoryService = Depends(get_memory_service),
):
    """Private memories are only readable by their owner"""
    return service.get_memory(memory_id, user_id)


@router.post("", response_model=MemoryOut, status_code=status.HTTP_201_CREATED)
def create_memory(
    body: MemoryBody,
    user_id: str = Depends(get_current_user_id),
    service: MemoryService = Depends(get_memory_service),
):
    return service.create_memory(body, user_id)


@router.put("/{memory_id}", response_model=MemoryOut)
def update_memory(
    memory_id: uuid.UUID,
    body: MemoryBody,
    user_id: str = Depends(get_current_user_id),
    service: MemoryService = Depends(get_memory_service),
):
    return service.update_memory(memory_id, body, user_id)


@router.delete("/{memory_id}", response_model=MessageOut)
def delete_memory(
    memory_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    service: MemoryService = Depends(get_memory_service),
):
    service.delete_memory(memory_id, user_id)
    return {"message": "Memory deleted"}
