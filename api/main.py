"""
FastAPI Backend dla walidacji scenariuszy hexagonalnych.

Endpoints:
    GET  /api/health             - health check
    GET  /api/scenarios          - lista scenariuszy
    GET  /api/scenarios/{name}   - wczytaj i zwaliduj scenariusz
    POST /api/scenarios/validate - zwaliduj przesłany plik zapisu
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.routers import scenarios


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    # Startup
    print("🚀 Hex Scenario API starting...")
    print(f"📁 Serving scenarios from: {scenarios.DATA_PATH}")
    yield
    # Shutdown
    print("👋 Hex Scenario API shutting down...")


app = FastAPI(
    title="Hex Scenario API",
    description="Backend API for loading and validating hexagonal tile scenarios",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - allow all origins (including file://)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scenarios.router, prefix="/api", tags=["Scenarios"])


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
