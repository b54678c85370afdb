"""Render a finding aid as a read-only HTML fragment."""

from pathlib import Path

from loguru import logger
from lxml import etree

from ead_outline.core.document import EadDocument
from ead_outline.errors import EadRenderError

STYLESHEET_PATH = Path(__file__).with_name("ead_to_html.xsl")


def load_stylesheet(path: Path = STYLESHEET_PATH) -> etree.XSLT:
    """Compile the EAD to HTML stylesheet."""
    return etree.XSLT(etree.parse(str(path)))


def render_finding_aid_html(document: EadDocument, *, stylesheet: etree.XSLT | None = None) -> str:
    """Render the descriptive sections and container list of a finding aid.

    Args:
        document: The parsed finding aid.
        stylesheet: A compiled stylesheet to reuse; compiled per call if omitted.

    Returns:
        A single ``<div class="ead-finding-aid">`` HTML fragment.
    """
    transform = stylesheet or load_stylesheet()
    try:
        result = transform(document.tree)
    except etree.XSLTApplyError as exc:
        msg = f"Cannot render finding aid: {exc}"
        raise EadRenderError(msg) from exc

    for entry in transform.error_log:
        logger.debug("XSLT: {}", entry.message)

    root = result.getroot()
    if root is None:
        return ""
    return etree.tostring(root, method="html", encoding="unicode")
