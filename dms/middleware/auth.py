import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from dms.auth import tokens
from dms.config import settings
from dms.errors import DMSError, Unauthenticated
from dms.utils.response import envelope

logger = logging.getLogger(__name__)

PUBLIC_PATHS = [
    "/register", "/login", "/password/forgot", "/password/reset",
    "/docs", "/redoc", "/openapi.json", "/favicon.ico",
]

def _is_public(path: str) -> bool:
    if path == "/":
        return True
    return any(path == p or path.startswith(p + "/") for p in PUBLIC_PATHS)

def _get_token(request: Request) -> str | None:
    token = request.headers.get(settings.auth_header)
    if token:
        return token.strip()
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth.split(" ", 1)[1].strip()
    return None

async def auth_middleware(request: Request, call_next):
    if request.method == "OPTIONS" or _is_public(request.url.path):
        return await call_next(request)

    try:
        token = _get_token(request)
        if not token:
            raise Unauthenticated()
        request.state.identity = tokens.verify(token)
    except DMSError as e:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, e.message)
        return JSONResponse(status_code=e.status_code, content=envelope(e.message))

    return await call_next(request)
