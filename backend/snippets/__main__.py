"""Run the server: python -m snippets"""

import uvicorn

from snippets.config import settings


def main() -> None:
    uvicorn.run(
        "snippets.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
