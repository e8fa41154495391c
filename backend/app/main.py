from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from app.database.connection import engine, init_db
import app.api.v1 as api_todo_lists
from app.services.exceptions import AppError, ErrorCode
from app.settings.config import settings
import logging

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code.value},
        headers=headers,
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed ids and missing body fields are client errors, reported as 400
    return JSONResponse(
        status_code=400,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "error_code": ErrorCode.BAD_REQUEST.value,
        },
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": ErrorCode.INTERNAL_ERROR.value},
    )

@app.on_event("startup")
async def startup():
    logger.info("Application starting...")
    await init_db()

@app.on_event("shutdown")
async def shutdown():
    logger.info("Application shutting down...")
    await engine.dispose()

router_prefix = "/v1"
app.include_router(api_todo_lists.user_router, prefix=router_prefix)
app.include_router(api_todo_lists.invitation_router, prefix=router_prefix)
app.include_router(api_todo_lists.todo_list_router, prefix=router_prefix)
app.include_router(api_todo_lists.item_router, prefix=router_prefix)
app.include_router(api_todo_lists.discussion_router, prefix=router_prefix)
app.include_router(api_todo_lists.message_router, prefix=router_prefix)

@app.get("/")
async def root():
    return {"message": "API running"}

@app.get("/healthcheck")
async def healthcheck():
    return {"status": "ok"}
