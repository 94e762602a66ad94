import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.exceptions import AppError
from app.core.schemas import ApiResponse, ok, failure
from app.database.supabase_client import create_supabase
from app.modules.accounts import routes as accounts_routes
from app.modules.auth import routes as auth_routes
from app.modules.pictures import routes as pictures_routes
from app.modules.pictures.provider import ProfilePictureProvider, create_http_client
from app.modules.profiles import routes as profiles_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)


def _envelope(response: ApiResponse, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.model_dump())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    # Domain failures are reported in the envelope, not through the status code
    logger.info("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.message)
    return _envelope(failure(exc.message, {"error": exc.kind}))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _envelope(failure("Invalid request body", {"error": "validation"}))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return _envelope(failure("Internal server error"), status_code=500)
    return _envelope(failure(str(exc)), status_code=500)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router)
app.include_router(accounts_routes.router)
app.include_router(profiles_routes.router)
app.include_router(pictures_routes.router)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    app.state.supabase = create_supabase(settings)
    app.state.http_client = create_http_client(settings.picture_timeout_seconds)
    app.state.picture_provider = ProfilePictureProvider(app.state.http_client)
    logger.info("Connected to document store at %s (schema %s)", settings.database_url, settings.db_schema)


@app.on_event("shutdown")
async def shutdown_event():
    http_client = getattr(app.state, "http_client", None)
    if http_client is not None:
        http_client.close()
    logger.info("Application shutdown")


@app.get("/test", response_model=ApiResponse)
async def test():
    return ok("Server is running")


@app.get("/health", response_model=ApiResponse)
async def health():
    return ok("healthy", {
        "status": "healthy",
        "app": settings.app_name,
        "environment": settings.environment,
        "database": {"url": settings.database_url, "schema": settings.db_schema},
        "collections": {"accounts": settings.accounts_table, "profile": settings.profile_table},
        "corsOrigin": settings.cors_origin,
    })
