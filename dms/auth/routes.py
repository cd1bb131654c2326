
from fastapi import APIRouter
from dms.auth.deps import UserRepoDep
from dms.auth.service import register_user, login_user, request_password_reset, reset_password
from dms.config import settings
from dms.schemas.auth import RegisterIn, LoginIn, ForgotPasswordIn, ResetPasswordIn
from dms.utils.response import success, created

router = APIRouter(tags=["auth"])

def _token_header(token: str) -> dict:
    return {settings.auth_header: token}

@router.post("/register", status_code=201)
def register(body: RegisterIn, users: UserRepoDep):
    user, token = register_user(users, body)
    profile = users.project(user)
    result = {k: profile[k] for k in ("userName", "firstName", "lastName", "email", "roleId")}
    result["token"] = token
    return created("Successfully created new user", result, headers=_token_header(token))

@router.post("/login")
def login(body: LoginIn, users: UserRepoDep):
    user, token = login_user(users, body.email, body.password)
    result = {"id": user.id, "userName": user.user_name, "email": user.email, "token": token}
    return success("Successfully logged in", result, headers=_token_header(token))

@router.get("/logout")
def logout():
    # tokens are stateless; the client discards its copy
    return success("You have logged out successfully")

@router.post("/password/forgot")
def forgot_password(body: ForgotPasswordIn, users: UserRepoDep):
    token = request_password_reset(users, body.email)
    result = {} if settings.is_production else {"resetToken": token}
    return success("Password reset token has been issued", result)

@router.post("/password/reset/{token}")
def password_reset(token: str, body: ResetPasswordIn, users: UserRepoDep):
    reset_password(users, token, body.password)
    return success("Password has been reset successfully")
