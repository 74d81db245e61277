# chat_backend/main.py

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from chat_backend.core.config import settings
from chat_backend.core.logger import logger
from chat_backend.core.setup import build_lifespan, setup_routers
from chat_backend.utils.responses import format_error_response


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description="Chat backend: authentication and message posting/listing",
    lifespan=build_lifespan(settings),
)

# ✅ CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ Health check
@app.get("/", tags=["root"], summary="Health check")
async def root():
    return {"status": "ok", "service": settings.APP_NAME}

# ✅ Error handlers
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

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=format_error_response(exc),
    )

# ✅ Routes
setup_routers(app)

# Locally stored images (unused when IMAGE_BUCKET is set)
app.mount(
    settings.IMAGES_BASE_URL,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="images",
)


def run():
    uvicorn.run("chat_backend.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
