"""Run the API with uvicorn: `python -m resultpattern`."""

import uvicorn

from resultpattern.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("resultpattern.main:app", host=settings.host, port=settings.port)
