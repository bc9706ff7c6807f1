from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)

    class Config:
        str_strip_whitespace = True

class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=1)
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)

    class Config:
        str_strip_whitespace = True

class UserOut(BaseModel):
    id: int
    username: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

# PUT only echoes the editable fields
class UserUpdateOut(BaseModel):
    username: str
    first_name: str
    last_name: str

    class Config:
        from_attributes = True
