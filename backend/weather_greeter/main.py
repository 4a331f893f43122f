import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from weather_greeter.core.errors import GreeterError
from weather_greeter.core.logger import logs
from weather_greeter.routes.base_chat import router as chat_router
from weather_greeter.routes.weather_route import router as weather_router
from weather_greeter.routes.places_route import router as places_router
from weather_greeter.routes.images_route import router as images_router

app = FastAPI(title="Weather Greeter API")
app.include_router(places_router, prefix="/api")
app.include_router(images_router, prefix="/api")
app.include_router(weather_router, prefix="/api")
app.include_router(chat_router, prefix="/api")

# --- Error Handlers ---
@app.exception_handler(GreeterError)
async def greeter_error_handler(request: Request, exc: GreeterError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logs.log(logging.WARNING, f"Rejected {request.url.path}", extra={"errors": exc.errors()})
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Weather Greeter API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "places": "/api/places",
            "images": "/api/images",
            "weather": "/api/weather",
            "chat": "/api/chat",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Weather Greeter API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weather_greeter.main:app", host="0.0.0.0", port=8000, reload=True)
