"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from nutriai.config import Settings


def main() -> None:
    """Run the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run("nutriai.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
