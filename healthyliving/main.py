import logging

import uvicorn
from healthyliving.api.api_run import app
from healthyliving.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from healthyliving.utilities.network import screen_urls


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    urls = screen_urls(APP_PORT)
    # Point to the URL to open in a browser (phone on the same LAN included)
    print(f"Recipe screen running on {urls[0]} (Press CTRL+C to quit)")
    for url in urls[1:]:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
