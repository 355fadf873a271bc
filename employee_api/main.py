# employee_api/main.py
from typing import Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager
from employee_api.routes import employee_router
from employee_api.database import open_storage
from employee_api.config import Settings, get_settings
from employee_api.logging_config import setup_logging

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        async with open_storage(settings) as repository:
            app.state.employee_repository = repository
            yield
        # Shutdown happens when open_storage exits

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Employee Management API"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "employee_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
