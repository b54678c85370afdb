"""Load EAD finding aids and address their elements."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger
from lxml import etree

from ead_outline.config import (
    CHILD_COMPONENT_XPATH,
    COMPONENT_TAGS,
    EAD_NAMESPACE,
    GENERATED_ID_PREFIX,
    NAMESPACES,
    TOP_LEVEL_COMPONENT_XPATH,
)
from ead_outline.errors import EadParseError, EadSourceError


@dataclass(frozen=True)
class EadDocument:
    """A parsed finding aid. Never modified after loading."""

    tree: etree._ElementTree

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()

    def xpath(self, expression: str, element: etree._Element | None = None) -> Any:
        """Evaluate an XPath expression with the ``ead`` prefix bound."""
        target = self.root if element is None else element
        return target.xpath(expression, namespaces=NAMESPACES)

    def locate(self, element: etree._Element) -> str:
        """Return the XPath locator of an element within this document."""
        return self.tree.getpath(element)

    def top_level_components(self) -> list[etree._Element]:
        return self.xpath(TOP_LEVEL_COMPONENT_XPATH)


def _adopt_namespace(root: etree._Element) -> None:
    # Some finding aids are exported without the EAD namespace.
    if etree.QName(root).namespace is not None:
        return
    logger.debug("Moving un-namespaced <{}> document into {}", root.tag, EAD_NAMESPACE)
    for element in root.iter():
        if isinstance(element.tag, str) and etree.QName(element).namespace is None:
            element.tag = f"{{{EAD_NAMESPACE}}}{element.tag}"


def parse_ead(data: str | bytes) -> EadDocument:
    """Parse EAD XML into an EadDocument.

    Args:
        data: The XML text. Strings are parsed as UTF-8 whatever their
            XML declaration says.

    Returns:
        The parsed document.

    Raises:
        EadParseError: If the data is not well-formed XML.
    """
    # A str is already decoded; its declared encoding no longer applies.
    encoding = None
    if isinstance(data, str):
        data = data.encode("utf-8")
        encoding = "utf-8"
    if not data.strip():
        msg = "Cannot parse EAD document: empty input"
        raise EadParseError(msg)
    parser = etree.XMLParser(
        encoding=encoding, resolve_entities=False, no_network=True, huge_tree=True
    )
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Cannot parse EAD document: {exc}"
        raise EadParseError(msg) from exc
    _adopt_namespace(root)
    return EadDocument(tree=root.getroottree())


def load_ead(path: str | Path) -> EadDocument:
    """Read and parse an EAD file."""
    try:
        data = Path(path).expanduser().read_bytes()
    except FileNotFoundError as exc:
        msg = f"Finding aid not found: {path}"
        raise EadSourceError(msg) from exc
    return parse_ead(data)


def is_component(element: Any) -> bool:
    """Whether an element is an archival component (``c`` or ``c01``..``c12``)."""
    if not isinstance(element.tag, str):
        return False
    qname = etree.QName(element)
    return qname.namespace == EAD_NAMESPACE and qname.localname in COMPONENT_TAGS


def child_components(component: etree._Element) -> list[etree._Element]:
    """Immediate child components in document order."""
    return component.xpath(CHILD_COMPONENT_XPATH, namespaces=NAMESPACES)


def normalized_text(element: etree._Element, expression: str = ".") -> str:
    """XPath ``normalize-space`` of the first node selected by expression."""
    return element.xpath(f"normalize-space({expression})", namespaces=NAMESPACES)


def component_ordinals(component: etree._Element) -> list[int]:
    """Position of the component and each component ancestor among its siblings.

    Matches ``xsl:number level="multiple"`` counting component elements, so
    the generated ids agree with the HTML rendering.
    """
    ordinals: list[int] = []
    element: etree._Element | None = component
    while element is not None:
        if is_component(element):
            preceding = sum(1 for s in element.itersiblings(preceding=True) if is_component(s))
            ordinals.append(preceding + 1)
        element = element.getparent()
    ordinals.reverse()
    return ordinals


def component_id(component: etree._Element) -> str:
    """The component's id attribute, or a structural id stable for the document."""
    explicit = component.get("id")
    if explicit:
        return explicit
    return GENERATED_ID_PREFIX + ".".join(str(n) for n in component_ordinals(component))
