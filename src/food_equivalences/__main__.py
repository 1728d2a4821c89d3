"""Development server for the food equivalences API."""

import uvicorn

from food_equivalences.config import Settings


def main() -> None:
    settings = Settings()
    # Reload stays off; the ASGI module builds its own container on import.
    uvicorn.run(
        "food_equivalences.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
