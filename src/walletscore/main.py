"""Application entry point for the walletscore server."""

from walletscore.app import App
from walletscore.config import Config
from walletscore.logging import setup_logging
from walletscore.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
