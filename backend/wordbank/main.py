# wordbank/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordbank import __version__
from wordbank.config import settings
from wordbank.core.bootstrap import ensure_default_admin
from wordbank.core.db import Database

from wordbank.api.v1.routers import auth, words

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME, version=__version__)

# CORS; credentials cannot be combined with a wildcard origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed or missing body/query fields are a client error (400), not 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"code": "VALIDATION_ERROR", "errors": jsonable_encoder(exc.errors())}},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Internal error text stays in the server log, never in the response
    logger.exception("[app] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "INTERNAL_ERROR"},
    )


@app.on_event("startup")
async def on_startup():
    database = Database.from_url(settings.database_url)
    await database.open(generate_schemas=settings.generate_schemas)
    app.state.database = database
    # Ensure there's a default admin account on first run
    await ensure_default_admin(settings.admin_username, settings.admin_password)
    logger.info("[app] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    database = getattr(app.state, "database", None)
    if database is not None:
        await database.close()


# REST
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(words.router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    return {"message": f"{settings.APP_NAME} is running"}


@app.get("/healthz")
def healthz():
    return {"ok": True}
