import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, func
from dms.db.session import Base

class Access(str, enum.Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    ROLE = "role"

class Document(Base):
    __tablename__ = "documents"
    id = Column(Integer, primary_key=True, index=True)
    # not a foreign key: documents outlive a deleted owner
    owner_id = Column(Integer, index=True, nullable=False)
    title = Column(String(50), nullable=False)
    content = Column(Text, nullable=False)
    access = Column(Enum(Access, values_callable=lambda a: [m.value for m in a]), nullable=False, default=Access.PUBLIC)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
