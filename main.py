"""Application entry point for the Health Calculators API.

Defines the FastAPI app, middleware and exception handlers, and includes the
API routers from the `api` package.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.calculators import router as calculators_router
from api.catalog import router as catalog_router
from core.config import get_settings
from core.error_handlers import register_exception_handlers
from core.logger import get_logger

settings = get_settings()
logger = get_logger("main")

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health():
    """Return basic health status."""
    return {"status": "healthy", "version": settings.app_version}


# include routers
app.include_router(calculators_router)
app.include_router(catalog_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
