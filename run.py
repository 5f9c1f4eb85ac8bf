import uvicorn

from portfolio.core.config import settings

if __name__ == "__main__":
    # using "portfolio.main:app" string import allows reload=True to work
    uvicorn.run(
        "portfolio.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.ENVIRONMENT == "development"
    )
