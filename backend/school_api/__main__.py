"""Serve the School API with uvicorn.

Usage: python -m school_api   (or the `school-api` console script)
Listens on HOST:PORT from the environment, 0.0.0.0:3000 by default.
"""

import uvicorn

from .config import Settings


def main():
    settings = Settings()
    uvicorn.run(
        "school_api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == '__main__':
    main()
