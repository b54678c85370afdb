"""Build the navigation outline of a finding aid."""

from dataclasses import dataclass

from loguru import logger
from lxml import etree

from ead_outline.core.containers import (
    ContainerIndex,
    SkippedReference,
    index_containers,
    resolve_containers,
)
from ead_outline.core.document import (
    EadDocument,
    child_components,
    component_id,
    normalized_text,
)
from ead_outline.models.node import DisplayNode


@dataclass(frozen=True)
class BuildContext:
    """State shared by one build, passed down the recursion."""

    document: EadDocument
    index: ContainerIndex
    skipped: list[SkippedReference] | None = None


def component_label(component: etree._Element) -> str:
    """Title, followed by the date in parentheses when there is one."""
    title = normalized_text(component, "ead:did/ead:unittitle")
    date = normalized_text(component, "ead:did/ead:unitdate")
    if not date:
        return title
    return f"{title} ({date})"


def build_component_node(component: etree._Element, *, context: BuildContext) -> DisplayNode:
    """Build the display node of a component and its descendants."""
    children = tuple(
        build_component_node(child, context=context) for child in child_components(component)
    )
    containers = resolve_containers(
        component,
        document=context.document,
        index=context.index,
        skipped=context.skipped,
    )
    return DisplayNode(
        id=component_id(component),
        text=component_label(component),
        type=component.get("level", ""),
        children=children,
        containers=tuple(containers),
        locator=context.document.locate(component),
    )


def build_component_tree(
    document: EadDocument,
    *,
    skipped: list[SkippedReference] | None = None,
) -> list[DisplayNode]:
    """Build display nodes for the top-level components of the ``dsc``.

    Args:
        document: The parsed finding aid.
        skipped: If given, receives folder references dropped while resolving
            containers.

    Returns:
        Top-level display nodes in document order.
    """
    context = BuildContext(document=document, index=index_containers(document), skipped=skipped)
    nodes = [
        build_component_node(component, context=context)
        for component in document.top_level_components()
    ]
    logger.debug("Built outline with {} top-level components", len(nodes))
    return nodes
