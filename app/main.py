"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the HTTP info server.
"""

import argparse
import logging

from app.bootstrap import bootstrap_create_server
from app.config import SettingsLoadError, config_load_settings
from app.runtime import FAULT_EXIT_CODE, ProcessFaultHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("app.main")


def main() -> None:
    """Run the HTTP info server until a shutdown signal completes the drain.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Always raised with the process exit status.
    """

    argument_parser = argparse.ArgumentParser(description="HTTP info server runtime entrypoint")
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional listening port override; takes precedence over `PORT`",
    )
    parsed_arguments = argument_parser.parse_args()

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    fault_handler = ProcessFaultHandler()
    fault_handler.fault_install()

    overrides = {}
    if parsed_arguments.port is not None:
        overrides["application_port"] = parsed_arguments.port
    try:
        settings = config_load_settings(**overrides)
    except SettingsLoadError as error:
        logger.error("%s", error)
        raise SystemExit(FAULT_EXIT_CODE) from error

    logging.getLogger().setLevel(settings.log_level.upper())

    server = bootstrap_create_server(settings=settings, fault_handler=fault_handler)
    raise SystemExit(server.server_run_until_stopped())


if __name__ == "__main__":
    main()
