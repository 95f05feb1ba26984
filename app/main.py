from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import os
from app.routes import catalog, staff, customers, memberships, coupons, checkout, appointments, dashboard
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s starting (%s)", settings.APP_NAME,
                "production" if settings.IS_PRODUCTION else "development")
    yield
    logger.info("%s shutting down", settings.APP_NAME)

app = FastAPI(
    title=settings.APP_NAME,
    description="Back office for salon bookings: calendar, catalog, memberships, coupons and checkout",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGIN_LIST,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog.router, prefix="/api/catalog", tags=["Catalog"])
app.include_router(staff.router, prefix="/api/staff", tags=["Staff"])
app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])
app.include_router(memberships.router, prefix="/api/memberships", tags=["Memberships"])
app.include_router(coupons.router, prefix="/api/coupons", tags=["Coupons"])
app.include_router(checkout.router, prefix="/api/checkout", tags=["Checkout"])
app.include_router(appointments.router, prefix="/api/appointments", tags=["Appointments"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "status": "healthy",
        "version": "1.0.0",
        "environment": "production" if settings.IS_PRODUCTION else "development"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "message": f"{settings.APP_NAME} is running",
        "environment": "production" if settings.IS_PRODUCTION else "development"
    }

@app.get("/ping")
async def ping():
    return {"message": "pong"}

if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=not settings.IS_PRODUCTION)
