"""
Discount Service Application

Prices shopping carts by stacking brand, category, voucher and bank
discounts on top of each other.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from .core.config import settings
from .database.rules import rule_db, seed_sample_rules
from .routes import discounts_router, rules_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Discount Service starting up...")
    if settings.seed_sample_rules:
        count = seed_sample_rules(rule_db)
        logger.info(f"Seeded {count} sample discount rules")
    yield
    logger.info("Discount Service shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart pricing with stacked brand, category, voucher and bank discounts",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(discounts_router)
app.include_router(rules_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Discount Service API",
        "docs": "/docs",
        "endpoints": {
            "calculate": "/api/discounts/calculate",
            "validate": "/api/discounts/validate",
            "rules": "/api/rules",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "discount-service"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "discount_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
