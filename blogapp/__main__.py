"""Run the API with uvicorn: ``python -m blogapp``."""

import uvicorn

from blogapp.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("blogapp.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
