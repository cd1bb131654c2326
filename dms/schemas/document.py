
from datetime import datetime
from pydantic import BaseModel, Field
from dms.models.document import Access

class DocumentCreate(BaseModel):
    title: str = Field(min_length=5, max_length=50)
    content: str = Field(min_length=5)
    access: Access

class DocumentUpdate(BaseModel):
    title: str | None = Field(None, min_length=5, max_length=50)
    content: str | None = Field(None, min_length=5)

class DocumentOut(BaseModel):
    id: int
    title: str
    content: str
    access: Access
    owner_id: int = Field(serialization_alias="ownerId")
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True
