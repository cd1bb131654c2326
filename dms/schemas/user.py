
from datetime import datetime
from pydantic import BaseModel, Field

class UserOut(BaseModel):
    id: int
    user_name: str = Field(serialization_alias="userName")
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    email: str
    role: int = Field(serialization_alias="roleId")
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True
