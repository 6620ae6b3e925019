"""Run the service with uvicorn: ``python -m roster``."""
import uvicorn

from roster.core.config import settings

if __name__ == "__main__":
    uvicorn.run("roster.main:app", host=settings.host, port=settings.port)
