import uvicorn

from ecell.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "ecell.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "dev",
    )
