import logging

from fastapi import FastAPI

from installed_versions.core.dependencies import create_registry

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Installed Versions Registry",
    version="0.1.0",
    description="Read-only HTTP view over a synthetic installed-package manifest.",
)


@app.on_event("startup")
async def startup_event() -> None:
    """
    Create the registry for the configured data source. The source itself is
    read on the first query.
    """
    app.state.registry = create_registry()
    logger.info(f"Registry configured for {app.state.registry.source.describe()}")


@app.get("/health")
async def health() -> dict:
    """
    Lightweight health check endpoint.
    """
    return {"status": "ok"}


from installed_versions.api.registry import router as registry_router

app.include_router(registry_router, prefix="/registry", tags=["registry"])


if __name__ == "__main__":
    """
    Allow running `python installed_versions/main.py` to start the Uvicorn
    development server.
    """
    import uvicorn

    uvicorn.run(
        "installed_versions.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
