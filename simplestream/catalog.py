"""Read-only model of a Simplestream products document.

A Catalog owns the parsed document. Products are lightweight views that keep
a reference to their Catalog and their key under "products"; every getter
reads the document again, nothing is cached. A Product is only meaningful
while the document of its Catalog is unchanged, and the Catalog never
mutates it.
"""

from typing import Any, Dict, List, Optional

from .accessors import get_bool, get_last_key, get_object, get_string
from .config import ARCH_NAME, IMAGE_TAG, INFO_TAG
from .exceptions import MissingFieldError
from .loader import parse_document

PRODUCTS_KEY = "products"
VERSIONS_KEY = "versions"
ITEMS_KEY = "items"
CURRENT_ALIAS = "default"
# Shared by several products, so never identifies a release.
SHARED_ALIAS = "lts"


class Product:
    """
    View over one member of the "products" object.

    An empty Product (``key is None``) is falsy and every getter on it raises
    MissingFieldError.
    """

    __slots__ = ("_catalog", "_key")

    def __init__(self, catalog: "Catalog", key: Optional[str]):
        self._catalog = catalog
        self._key = key

    @property
    def key(self) -> Optional[str]:
        """Member name under "products", or None for the empty Product."""
        return self._key

    def __bool__(self) -> bool:
        return self.is_valid()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._catalog is other._catalog and self.key == other.key

    def __hash__(self) -> int:
        return hash((id(self._catalog), self.key))

    def __copy__(self) -> "Product":
        return Product(self._catalog, self.key)

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Product":
        # The document belongs to the catalog; a copy is still a view into it.
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Product({self.key!r})"

    def is_valid(self) -> bool:
        if self.key is None:
            return False
        products = self._catalog._products()
        return isinstance(products.get(self.key), dict)

    def _node(self) -> Dict[str, Any]:
        if self.key is None:
            raise MissingFieldError("product", "product is empty")
        return get_object(self._catalog._products(), self.key)

    def get_supported(self) -> bool:
        return get_bool(self._node(), "supported")

    def get_aliases(self) -> str:
        return get_string(self._node(), "aliases")

    def get_release(self) -> str:
        return get_string(self._node(), "release")

    def get_release_title(self) -> str:
        return get_string(self._node(), "release_title")

    def get_version(self) -> str:
        return get_string(self._node(), "version")

    def resolve_revision(self, revision: Optional[str] = None) -> str:
        """
        Return the revision id a lookup would use.

        Without an explicit revision the last member of "versions" in
        document order is taken as the most recent one.

        Raises:
            EmptyCollectionError: If no revision is given and "versions" is empty
            MissingFieldError: If an explicit revision is not in "versions"
        """
        versions = get_object(self._node(), VERSIONS_KEY)
        if not revision:
            return get_last_key(versions, VERSIONS_KEY)
        get_object(versions, revision)
        return revision

    def _revision_node(self, revision: Optional[str]) -> Dict[str, Any]:
        versions = get_object(self._node(), VERSIONS_KEY)
        return get_object(versions, self.resolve_revision(revision))

    def get_pubname(self, revision: Optional[str] = None) -> str:
        """Published name of a revision (latest when ``revision`` is omitted)."""
        return get_string(self._revision_node(revision), "pubname")

    def get_image_info(self, revision: Optional[str] = None) -> str:
        """Checksum of the configured disk image in a revision (latest when omitted)."""
        items = get_object(self._revision_node(revision), ITEMS_KEY)
        image = get_object(items, self._catalog.image_tag)
        return get_string(image, self._catalog.info_tag)


class Catalog:
    """
    High-level access to the products of a Simplestream document.

    Args:
        document: Raw document text
        arch: Architecture suffix a product key must end with
        image_tag: Item name of the disk image inside a revision
        info_tag: Field of the disk image item holding the checksum

    Raises:
        DocumentParseError: If the document is not valid JSON
        MissingFieldError: If the document has no "products" member
        TypeMismatchError: If "products" is not an object
    """

    def __init__(
        self,
        document: str | bytes,
        arch: str = ARCH_NAME,
        image_tag: str = IMAGE_TAG,
        info_tag: str = INFO_TAG,
    ):
        self._root = parse_document(document)
        self.arch = arch
        self.image_tag = image_tag
        self.info_tag = info_tag
        self._products()

    def __copy__(self) -> "Catalog":
        raise TypeError("Catalog owns its document and cannot be copied")

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Catalog":
        raise TypeError("Catalog owns its document and cannot be copied")

    def _products(self) -> Dict[str, Any]:
        return get_object(self._root, PRODUCTS_KEY)

    def empty_product(self) -> Product:
        return Product(self, None)

    def get_products(self) -> List[Product]:
        """Products whose key ends with the configured architecture, in document order."""
        products = self._products()
        return [Product(self, name) for name in products if name.endswith(self.arch)]

    def get_supported_products(self) -> List[Product]:
        return [product for product in self.get_products() if product.get_supported()]

    def get_current_product(self) -> Product:
        """
        Return the first product whose aliases mention "default".

        The alias string is searched as a whole, not split into tokens.
        Returns an empty Product when nothing matches.
        """
        for product in self.get_products():
            if CURRENT_ALIAS in product.get_aliases():
                return product
        return self.empty_product()

    def find_product(self, release: str) -> Product:
        """
        Return the first product matching a release name or version.

        A product matches when ``release`` equals one of its aliases (other
        than "lts"), or when ``release`` contains its version string, e.g.
        "Ubuntu-24.04" matches version "24.04". Both checks run per product
        in a single pass, so the first product matching either way wins.
        Returns an empty Product when nothing matches.
        """
        for product in self.get_products():
            aliases = [alias for alias in product.get_aliases().split(",") if alias != SHARED_ALIAS]
            if release in aliases:
                return product
            if product.get_version() in release:
                return product
        return self.empty_product()
