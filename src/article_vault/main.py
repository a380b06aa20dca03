from importlib import metadata

from fastapi import FastAPI

from article_vault.api.router import router as articles_router

try:
    version = metadata.version("article-vault")
except metadata.PackageNotFoundError:
    version = "0.1.0"

app = FastAPI(
    title="Article Vault API",
    version=version,
    description="Article store and git status for a local blog repository.",
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(articles_router, prefix="/api")


if __name__ == "__main__":
    import logging

    import uvicorn

    from article_vault.dependencies import get_app_settings

    debug = get_app_settings().debug
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    uvicorn.run(
        "article_vault.main:app",
        host="127.0.0.1",
        port=8000,
        reload=debug,
    )
