# resumehub/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Your configuration and DB
from resumehub.config import settings
from resumehub.core.db import init_db, close_db
from resumehub.core.errors import InternalError, NotFound, ServiceError, ValidationError
from resumehub.core.bootstrap import build_account_service, sweep_orphaned_documents

from resumehub.api.routers import auth, users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS for the browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    # Every failure: short machine-readable code + human-readable message
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_dict()})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # A path id that is not an integer names no account
    if any(err.get("loc") and err["loc"][0] == "path" for err in errors):
        error = NotFound("User not found")
    else:
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = first.get("msg", "invalid request")
        error = ValidationError(f"{field}: {message}" if field else message)
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_dict()})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Traceback stays in the server log; the caller gets an opaque error
    logger.exception("[api] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": InternalError().to_dict()})

@app.on_event("startup")
async def on_startup():
    await init_db()
    app.state.accounts = build_account_service(settings)
    logger.info("[startup] uploads=%s auth_mode=%s", settings.upload_dir, settings.auth_mode)
    if settings.sweep_orphans_on_startup:
        await sweep_orphaned_documents(app.state.accounts)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)

@app.get(f"{settings.api_prefix}/health")
def health():
    return {"ok": True}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("resumehub.main:app", host=settings.host, port=settings.port)
