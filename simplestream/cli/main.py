"""
Prints the latest Ubuntu Cloud image information.

The products document is fetched once per invocation, then the requested
queries run in a fixed order: --list, --current, --sha256.

# Configuration
Environment variables (see simplestream.config):
- SIMPLESTREAM_HOST, SIMPLESTREAM_PATH: where to fetch the document from
- SIMPLESTREAM_ARCH: architecture suffix used to select products
- SIMPLESTREAM_IMAGE_TAG, SIMPLESTREAM_INFO_TAG: which checksum --sha256 prints
- SIMPLESTREAM_TIMEOUT: request timeout in seconds
- SIMPLESTREAM_LOG_LEVEL, SIMPLESTREAM_LOG_FORMAT: logging on stderr
- TELEMETRY, SENTRY_DSN: optional error reporting
"""

import os
import sys
from typing import List, Optional, Sequence

import click
import sentry_sdk

from .. import __version__
from ..catalog import Catalog
from ..config import Config, load_config
from ..console import print_checksum, print_current_release, print_error, print_supported_releases
from ..exceptions import ConfigurationError, SimplestreamError
from ..http_client import fetch_document
from ..logging_config import logger, set_level

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
RAW_ARGS_KEY = "simplestream.raw_args"


def evaluate_boolean(value: str) -> bool:
    """Evaluate string boolean values from environment variables."""
    return value.lower() in ["true", "yes", "yeah", "1"]


def initialize_sentry() -> bool:
    """
    Initialize Sentry for error tracking.

    Reporting is off unless SENTRY_DSN is set and TELEMETRY is not false.

    Returns:
        True if Sentry was initialized
    """
    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn or not evaluate_boolean(os.getenv("TELEMETRY", "true")):
        return False

    def before_send(event, hint):
        """
        Filter events before sending to Sentry.
        Don't send configuration or usage errors - these are user errors.
        """
        if "exc_info" in hint:
            exc_type, exc_value, tb = hint["exc_info"]
            if isinstance(exc_value, (ConfigurationError, click.UsageError)):
                return None
        return event

    sentry_sdk.init(
        dsn=sentry_dsn,
        send_default_pii=False,
        release=f"simplestream@{__version__}",
        before_send=before_send,
    )
    return True


def run_queries(
    catalog: Catalog,
    config: Config,
    list_releases: bool = False,
    current: bool = False,
    releases: Sequence[str] = (),
) -> bool:
    """
    Run the requested queries against a catalog and print the results.

    Args:
        catalog: Parsed catalog
        config: Active configuration
        list_releases: Print supported releases
        current: Print the current default release
        releases: Release names or versions to print checksums for

    Returns:
        True if every requested release was found

    Raises:
        CatalogError: If the catalog does not have the expected structure
    """
    success = True

    if list_releases:
        products = catalog.get_supported_products()
        logger.debug(f"Found {len(products)} supported {config.arch} products")
        print_supported_releases(products)

    if current:
        product = catalog.get_current_product()
        if product:
            print_current_release(product)
        else:
            print_error("No current release found.")
            success = False

    for release in releases:
        product = catalog.find_product(release)
        if product:
            logger.debug(f"Release '{release}' resolved to {product.key}")
            print_checksum(product, config.image_tag)
        else:
            print_error(f'Release "{release}" not found.')
            success = False

    return success


class SimplestreamCommand(click.Command):
    """Command that keeps the raw argument list for order-sensitive checks."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


def first_release_before_sha256(args: Sequence[str]) -> Optional[str]:
    """
    Return the first RELEASE argument that precedes -s/--sha256.

    Only arguments after the sha256 flag are release tokens, so anything
    positional seen earlier is unrecognized.
    """
    positional_only = False
    for arg in args:
        if not positional_only:
            if arg == "--":
                positional_only = True
                continue
            if arg == "--sha256" or (arg.startswith("-") and not arg.startswith("--") and "s" in arg[1:]):
                return None
            if arg.startswith("-"):
                continue
        return arg
    return None


@click.command(
    cls=SimplestreamCommand,
    context_settings=CONTEXT_SETTINGS,
    epilog="RELEASE is a release version, name, or initial.",
)
@click.option("-l", "--list", "list_releases", is_flag=True, help="List currently supported Ubuntu releases.")
@click.option("-c", "--current", is_flag=True, help="Current Ubuntu LTS version.")
@click.option("-s", "--sha256", is_flag=True, help="SHA256 checksum of disk1.img for each RELEASE.")
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostic details to stderr.")
@click.version_option(__version__, "--version", prog_name="simplestream")
@click.argument("releases", nargs=-1, metavar="[RELEASE]...")
@click.pass_context
def cli(
    ctx: click.Context,
    list_releases: bool,
    current: bool,
    sha256: bool,
    verbose: bool,
    releases: tuple[str, ...],
) -> None:
    """Prints the latest Ubuntu Cloud image information."""
    if not (list_releases or current or sha256 or releases):
        click.echo(ctx.get_help())
        ctx.exit(1)

    unrecognized = first_release_before_sha256(ctx.meta.get(RAW_ARGS_KEY, ()))
    if unrecognized is not None:
        raise click.UsageError(f"unrecognized argument: {unrecognized}")

    if sha256 and not releases:
        print_error("No release specified.")
        click.echo()
        click.echo(ctx.get_help())
        ctx.exit(1)

    if verbose:
        set_level("DEBUG")

    initialize_sentry()

    try:
        config = load_config()
        document = fetch_document(config.url, config.timeout)
        catalog = Catalog(document, arch=config.arch, image_tag=config.image_tag, info_tag=config.info_tag)
        success = run_queries(catalog, config, list_releases=list_releases, current=current, releases=releases)
    except SimplestreamError as e:
        logger.debug("Query failed", exc_info=True)
        sentry_sdk.capture_exception(e)
        print_error(str(e))
        ctx.exit(1)

    if not success:
        ctx.exit(1)


def main() -> None:
    """Main entry point for the simplestream CLI."""
    cli(prog_name="simplestream")


if __name__ == "__main__":
    sys.exit(main())
