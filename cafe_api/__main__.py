"""Run the cafe API with uvicorn: ``python -m cafe_api``."""

import uvicorn

from cafe_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("cafe_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
