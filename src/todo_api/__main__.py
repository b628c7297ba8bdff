"""
Run the Todo API with uvicorn.

Usage:
    python -m todo_api

Host and port come from the HOST and PORT environment variables
(defaults: 0.0.0.0 and 8000).
"""

import uvicorn

from .settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
