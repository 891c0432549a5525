"""Process-wide logging setup shared by both services."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [{service}] %(name)s: %(message)s"
HANDLER_NAME = "service"


def configure_logging(service_name: str, level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT.format(service=service_name)))
    root.addHandler(handler)
