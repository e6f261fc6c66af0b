import logging

import uvicorn

from storefront.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    uvicorn.run("storefront.web.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
