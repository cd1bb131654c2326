
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dms.middleware.auth import auth_middleware
from dms.config import settings
from dms.db.session import init_db
from dms.errors import DMSError, InternalError
from dms.logging_config import setup_logging
from dms.utils.response import envelope
from dms.auth.routes import router as auth_router
from dms.users.routes import router as users_router
from dms.documents.routes import router as documents_router
from dms.admin.routes import router as admin_router

logger = logging.getLogger(__name__)

def validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = loc[-1] if loc else "body"
    msg = first.get("msg", "is invalid")
    return f'"{field}" {msg[:1].lower()}{msg[1:]}'

async def dms_error_handler(request: Request, exc: DMSError):
    return JSONResponse(status_code=exc.status_code, content=envelope(exc.message))

async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content=envelope(validation_message(exc)))

async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    err = InternalError()
    return JSONResponse(status_code=err.status_code, content=envelope(err.message))

def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app_name)

    app.middleware("http")(auth_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.auth_header],
    )

    app.add_exception_handler(DMSError, dms_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(documents_router)
    app.include_router(admin_router)

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/", tags=["root"])
    def root():
        return {"message": "You are welcome to the DMS api", "body": {"name": settings.app_name, "env": settings.app_env}}

    return app

app = create_app()
