# main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from ads_online.config import settings
from ads_online.api.routes import auth, ads, comments, images, users
from ads_online.core.exceptions import error_response, register_exception_handlers
from ads_online.core.logging_middleware import log_requests
from ads_online.core.logger import logger

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# Uniform {status, message} error bodies
register_exception_handlers(app)

# Request size guard: one image plus the multipart envelope
MAX_REQUEST_SIZE = settings.image_max_size + 1024 * 1024

@app.middleware("http")
async def limit_upload_size(request: Request, call_next):
    """Reject bodies that cannot hold a valid image"""
    if request.method in ["POST", "PUT", "PATCH"]:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > MAX_REQUEST_SIZE:
            logger.warning(f"Rejected {request.method} {request.url.path}: body of {content_length} bytes")
            return error_response(
                400,
                f"Request body is too large. Max: {MAX_REQUEST_SIZE} bytes"
            )
    return await call_next(request)

# Logging middleware (registered last so it wraps everything)
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(ads.router)
app.include_router(comments.router)
app.include_router(images.router)
app.include_router(users.router)

@app.on_event("startup")
async def startup_event():
    logger.info(f"{settings.app_name} started")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"{settings.app_name} stopped")

@app.get("/health")
def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "service": settings.app_name
    }
