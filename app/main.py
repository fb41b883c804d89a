# app/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routers import messages
from app.db.mongo import client, ensure_indexes, verify_mongodb_connection
from app.core.config import Settings, settings
from app.core.logger import logger
from app.utils.errors import ServiceUnavailableError
from app.utils.responses import format_error_response
from pymongo.errors import PyMongoError


SERVICE_NAME = "Message Board API"

app = FastAPI(
    title=SERVICE_NAME,
    version="0.1.0",
    description="Stores and serves short messages for browser clients on other origins",
)


def configure_cors(app: FastAPI, cfg: Settings = settings) -> FastAPI:
    """Let browser clients served from the configured origins call the API."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ALLOW_ORIGINS,
        allow_credentials=cfg.CORS_ALLOW_CREDENTIALS,
        allow_methods=cfg.CORS_ALLOW_METHODS,
        allow_headers=cfg.CORS_ALLOW_HEADERS,
    )
    return app


configure_cors(app)


# Startup/shutdown
@app.on_event("startup")
async def startup():
    logger.info("CORS allowed origins: %s", ", ".join(settings.CORS_ALLOW_ORIGINS))
    if await verify_mongodb_connection():
        await ensure_indexes()

@app.on_event("shutdown")
async def shutdown_db():
    client.close()

# Health check
@app.get("/", tags=["root"], summary="Health check")
async def root():
    return {"status": "ok", "service": SERVICE_NAME}

# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error_response(exc, status_code=exc.status_code),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=format_error_response(exc, status_code=422),
    )

@app.exception_handler(PyMongoError)
async def database_exception_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    err = ServiceUnavailableError()
    return JSONResponse(
        status_code=err.status_code,
        content=format_error_response(err, status_code=err.status_code),
        headers=err.headers,
    )

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=format_error_response(exc),
    )

# Routes
app.include_router(messages.router, prefix="/messages")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
