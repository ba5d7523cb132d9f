"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the web server or
issues one catalog request from the command line.
"""

import argparse
import json

import httpx
import uvicorn

from hotstar_web.bootstrap import bootstrap_create_application, bootstrap_create_catalog_client
from hotstar_web.config import config_configure_logging, config_load_settings


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; `sys.argv` is used when omitted.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when a catalog request fails.
    """

    argument_parser = argparse.ArgumentParser(description="Hotstar web runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "catalog-get"),
        help="Runtime command: `serve` starts the server, `catalog-get` issues one catalog GET request",
        type=str,
    )
    argument_parser.add_argument(
        "path",
        nargs="?",
        help="Catalog path relative to the base URL for `catalog-get`, e.g. /trending/all/week",
        type=str,
    )
    argument_parser.add_argument(
        "--param",
        dest="params",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter for `catalog-get`; may be repeated",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "catalog-get":
        if not parsed_arguments.path:
            argument_parser.error("`catalog-get` requires a path")
        query_parameters = main_parse_query_parameters(argument_parser, parsed_arguments.params)
        with bootstrap_create_catalog_client(settings=settings) as catalog_client:
            try:
                payload = catalog_client.adapter_get_json(parsed_arguments.path, params=query_parameters)
            except httpx.HTTPError as error:
                raise SystemExit(1) from error
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=0,
    )


def main_parse_query_parameters(
    argument_parser: argparse.ArgumentParser,
    raw_parameters: list[str],
) -> dict[str, str]:
    """Parse repeated `KEY=VALUE` arguments into a query parameter mapping.

    Args:
        argument_parser: Parser used to report malformed arguments.
        raw_parameters: Raw `KEY=VALUE` strings.

    Returns:
        dict[str, str]: Query parameters in argument order.
    """

    query_parameters: dict[str, str] = {}
    for raw_parameter in raw_parameters:
        key, separator, value = raw_parameter.partition("=")
        if not separator or not key.strip():
            argument_parser.error(f"invalid --param value: {raw_parameter}")
        query_parameters[key.strip()] = value
    return query_parameters


if __name__ == "__main__":
    main()
