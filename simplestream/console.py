"""Rich console utilities for simplestream.

All query output goes through the shared console so styling stays
consistent and is dropped automatically when stdout is not a terminal.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .catalog import Product


custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "heading": "bold",
        "highlight": "magenta",
    }
)

# Shared console instance. Catalog text is printed verbatim: no emoji codes,
# no highlighting, and soft wrapping keeps checksums on one line.
console = Console(
    theme=custom_theme,
    highlight=False,
    emoji=False,
    soft_wrap=True,
)


def print_supported_releases(products: Iterable[Product]) -> None:
    """
    Print the supported releases, one per line.

    Args:
        products: Supported products in catalog order
    """
    console.print("[heading]Supported Ubuntu releases:[/heading]")
    for product in products:
        console.print(f"  {escape(product.get_release_title())} ([highlight]{escape(product.get_release())}[/highlight])")


def print_current_release(product: Product) -> None:
    """Print the version and published name of the current release."""
    console.print(f"[heading]Current Ubuntu LTS version:[/heading] {escape(product.get_version())}")
    console.print(f"  {escape(product.get_pubname())}")


def print_checksum(product: Product, image_tag: str) -> None:
    """Print the checksum of a product's disk image in its latest revision."""
    console.print(
        f"[heading]SHA256 checksum for {escape(image_tag)} of {escape(product.get_pubname())}:[/heading]"
    )
    console.print(f"  [success]{escape(product.get_image_info())}[/success]")


def print_error(message: str) -> None:
    """Print a single diagnostic line."""
    console.print(f"[error]error:[/error] {escape(message)}")
