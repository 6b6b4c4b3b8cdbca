"""
Run the API with uvicorn.

Host, port and log level come from the environment (see wordbank.config).

Usage:
    python -m wordbank
"""
import uvicorn

from wordbank.config import settings


def main() -> None:
    uvicorn.run(
        "wordbank.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=False,
    )


if __name__ == "__main__":
    main()
