import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Timezone-aware current UTC time; stored timestamps must carry tzinfo"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Common base for all persisted entities"""
