# __main__.py

import uvicorn

from green_pizza.config import get_settings


def main():
    """ Serve the app with uvicorn on the configured host and port. """
    settings = get_settings()
    uvicorn.run(
        "green_pizza.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
