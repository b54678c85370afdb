"""Container list outline: only series and subseries, linked to the container list."""

from lxml import etree

from ead_outline.config import CONTAINER_LIST_ID_PREFIX, SERIES_LEVELS, resolve_href_template
from ead_outline.core.containers import SkippedReference, index_containers, resolve_containers
from ead_outline.core.document import EadDocument, child_components, component_id
from ead_outline.core.tree.builder import BuildContext, component_label
from ead_outline.models.node import DisplayNode


def build_series_node(
    component: etree._Element,
    *,
    context: BuildContext,
    object_id: str,
    href_template: str,
) -> DisplayNode | None:
    """Build a linked node for a series or subseries, or None for anything else.

    A component that is not a series drops its whole subtree; matching
    descendants are not promoted.
    """
    if component.get("level", "") not in SERIES_LEVELS:
        return None

    children = [
        build_series_node(
            child, context=context, object_id=object_id, href_template=href_template
        )
        for child in child_components(component)
    ]
    node_id = component_id(component)
    return DisplayNode(
        id=CONTAINER_LIST_ID_PREFIX + node_id,
        text=component_label(component),
        type=component.get("level", ""),
        children=tuple(child for child in children if child is not None),
        containers=tuple(
            resolve_containers(
                component,
                document=context.document,
                index=context.index,
                skipped=context.skipped,
            )
        ),
        locator=context.document.locate(component),
        href=href_template.format(object_id=object_id, node_id=node_id),
    )


def build_series_tree(
    document: EadDocument,
    *,
    object_id: str,
    href_template: str | None = None,
    skipped: list[SkippedReference] | None = None,
) -> list[DisplayNode]:
    """Build the series-only outline of a finding aid.

    Args:
        document: The parsed finding aid.
        object_id: Identifier of the object holding the finding aid, used in links.
        href_template: Format string with ``{object_id}`` and ``{node_id}``
            placeholders. Defaults to :func:`resolve_href_template`.
        skipped: If given, receives folder references dropped while resolving
            containers.
    """
    template = href_template or resolve_href_template()
    context = BuildContext(document=document, index=index_containers(document), skipped=skipped)
    nodes = [
        build_series_node(component, context=context, object_id=object_id, href_template=template)
        for component in document.top_level_components()
    ]
    return [node for node in nodes if node is not None]
