from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from stayhub.config import settings
from stayhub.logging_config import configure_logging
from stayhub.properties import router as properties_router
from stayhub.bookings import router as bookings_router
from stayhub.payments import router as payments_router
from stayhub.reviews import router as reviews_router

configure_logging(settings.LOG_LEVEL)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Property booking platform API",
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

# Include routers
app.include_router(
    properties_router.router,
    prefix=settings.API_V1_STR,
    tags=["Properties"]
)

app.include_router(
    bookings_router.router,
    prefix=settings.API_V1_STR,
    tags=["Bookings"]
)

app.include_router(
    payments_router.router,
    prefix=settings.API_V1_STR,
    tags=["Payments"]
)

app.include_router(
    reviews_router.router,
    prefix=settings.API_V1_STR,
    tags=["Reviews"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "StayHub Booking Platform API",
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
