"""Web entry point — starts the Flask call-flow API."""

import logging
import sys

from callflow_analyzer.config import load_config
from callflow_analyzer.web import create_app


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [CALLFLOW] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger(__name__).info(
        "Serving call flows from %s on %s:%d", config.log_file, config.host, config.port
    )
    app = create_app(config)
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
