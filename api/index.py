"""
Album Shop - Main FastAPI Application

Single entry point for the album API and cart routes.
The album catalog lives in memory and is rebuilt on every startup.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from albumshop.albums import AlbumService, AlbumStore
from albumshop.errors import InvalidInputError, NotFoundError
from albumshop.logging import get_logger
from albumshop.routers import albums_router, cart_router
from albumshop.routers.models import HealthResponse

logger = get_logger(__name__)

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup: fresh catalog for this process
    store = AlbumStore()
    app.state.album_service = AlbumService(store)
    logger.info(f"Album store seeded with {len(store)} albums")
    yield
    # Shutdown
    app.state.album_service = None


app = FastAPI(
    title="Album Shop",
    description="In-memory album catalog API with a shopping cart",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(albums_router, prefix="/albums")
app.include_router(cart_router, prefix="/cart")


# ==================== ERROR HANDLERS ====================

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": exc.message})


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"message": exc.message})


# ==================== HEALTH CHECK ====================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Album Shop listening on http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
