
from pydantic import BaseModel, EmailStr, Field
from dms.models.user import Role

PASSWORD_PATTERN = r"^[a-zA-Z0-9]{3,30}$"

class RegisterIn(BaseModel):
    user_name: str = Field(alias="userName", min_length=1, max_length=120)
    first_name: str = Field(alias="firstName", min_length=1, max_length=120)
    last_name: str = Field(alias="lastName", min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(min_length=6, max_length=30, pattern=PASSWORD_PATTERN)
    role: Role = Field(Role.STANDARD, alias="roleId")

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserUpdateIn(BaseModel):
    user_name: str | None = Field(None, alias="userName", min_length=1, max_length=120)
    first_name: str | None = Field(None, alias="firstName", min_length=1, max_length=120)
    last_name: str | None = Field(None, alias="lastName", min_length=1, max_length=120)
    email: EmailStr | None = None

class ForgotPasswordIn(BaseModel):
    email: EmailStr

class ResetPasswordIn(BaseModel):
    password: str = Field(min_length=6, max_length=30, pattern=PASSWORD_PATTERN)
