import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import settings
from src.database import Base, engine
from src.exceptions import register_exception_handlers
from src.auth import router as auth_router
from src.trips import router as trips_router
from src.operators import router as operators_router
from src.bookings import router as bookings_router
from src.miles import router as miles_router

def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

configure_logging()

# Create tables on start-up; schema migrations are out of scope
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Ferry and bus trip search, booking and loyalty miles API",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(
    auth_router.router,
    prefix=f"{settings.API_PREFIX}/auth",
    tags=["Authentication"]
)

app.include_router(
    trips_router.router,
    prefix=f"{settings.API_PREFIX}/trips",
    tags=["Trips"]
)

app.include_router(
    operators_router.router,
    prefix=f"{settings.API_PREFIX}/operators",
    tags=["Operators"]
)

app.include_router(
    bookings_router.router,
    prefix=settings.API_PREFIX,
    tags=["Bookings"]
)

app.include_router(
    miles_router.router,
    prefix=settings.API_PREFIX,
    tags=["Miles"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
