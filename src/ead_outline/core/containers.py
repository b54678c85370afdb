"""Resolve the physical containers (boxes, folders) of a component.

Finding aids encode containers in one of two ways:

* parented: a folder carries ``parent="..."`` naming the ``id`` of its box,
  which may live anywhere in the document;
* flat: the containers of a ``did`` are siblings, and every container whose
  type starts with "box" opens a new group.

Parented resolution wins whenever it produces anything; flat resolution is
only a fallback.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from loguru import logger
from lxml import etree

from ead_outline.core.document import EadDocument, normalized_text
from ead_outline.models.node import ContainerEntry, ContainerSummary

ContainerIndex = dict[str, list[etree._Element]]


@dataclass(frozen=True)
class SkippedReference:
    """A folder whose ``parent`` did not match exactly one container."""

    parent_id: str
    matches: int
    locator: str

    @property
    def reason(self) -> str:
        if self.matches == 0:
            return f"no container with id {self.parent_id!r}"
        return f"{self.matches} containers share id {self.parent_id!r}"


@dataclass(frozen=True)
class ParentedResolution:
    """Outcome of the parented pass over one component."""

    summaries: tuple[ContainerSummary, ...] = ()
    skipped: tuple[SkippedReference, ...] = ()

    @property
    def resolved(self) -> bool:
        return bool(self.summaries)


@dataclass
class _Group:
    fragments: list[str] = field(default_factory=list)
    elements: list[etree._Element] = field(default_factory=list)


def _type_label(container: etree._Element) -> str:
    return container.get("type", "")


def _fragment(container: etree._Element) -> str:
    return f"{_type_label(container)} {normalized_text(container)}"


def _summarize(
    document: EadDocument, fragments: list[str], elements: list[etree._Element]
) -> ContainerSummary:
    entries = {
        _type_label(element): ContainerEntry(
            id=element.get("id", ""),
            value=normalized_text(element),
            locator=document.locate(element),
        )
        for element in elements
    }
    return ContainerSummary(text=", ".join(fragments), entries=entries)


def index_containers(document: EadDocument) -> ContainerIndex:
    """Map every container id in the document to the containers carrying it."""
    index: ContainerIndex = defaultdict(list)
    for container in document.xpath("//ead:container[@id]"):
        index[container.get("id")].append(container)
    return dict(index)


def resolve_parented(
    component: etree._Element,
    *,
    document: EadDocument,
    index: ContainerIndex,
) -> ParentedResolution:
    """Pair each parented folder of the component with its box."""
    summaries: list[ContainerSummary] = []
    skipped: list[SkippedReference] = []
    for folder in document.xpath("ead:did/ead:container[@parent]", component):
        if not _type_label(folder).lower().startswith("folder"):
            continue
        parent_id = folder.get("parent")
        boxes = index.get(parent_id, [])
        if len(boxes) != 1:
            reference = SkippedReference(
                parent_id=parent_id, matches=len(boxes), locator=document.locate(folder)
            )
            logger.debug("Skipping folder at {}: {}", reference.locator, reference.reason)
            skipped.append(reference)
            continue
        box = boxes[0]
        summaries.append(_summarize(document, [_fragment(box), _fragment(folder)], [box, folder]))
    return ParentedResolution(summaries=tuple(summaries), skipped=tuple(skipped))


def resolve_flat(component: etree._Element, *, document: EadDocument) -> list[ContainerSummary]:
    """Group the component's sibling containers into runs starting at each box."""
    groups: list[_Group] = []
    current: _Group | None = None
    for container in document.xpath("ead:did/ead:container", component):
        if current is None or _type_label(container).lower().startswith("box"):
            # Containers before the first box form their own implicit group.
            if current is not None and current.elements:
                groups.append(current)
            current = _Group()
        current.fragments.append(_fragment(container))
        current.elements.append(container)
    if current is not None and current.elements:
        groups.append(current)
    return [_summarize(document, group.fragments, group.elements) for group in groups]


def resolve_containers(
    component: etree._Element,
    *,
    document: EadDocument,
    index: ContainerIndex,
    skipped: list[SkippedReference] | None = None,
) -> list[ContainerSummary]:
    """Resolve the component's containers, parented first, flat as fallback.

    Args:
        component: A ``c``/``cNN`` element.
        document: The document the component belongs to.
        index: Container id index from :func:`index_containers`.
        skipped: If given, receives folder references that were dropped.

    Returns:
        Container summaries in document order.
    """
    parented = resolve_parented(component, document=document, index=index)
    if skipped is not None:
        skipped.extend(parented.skipped)
    if parented.resolved:
        return list(parented.summaries)
    return resolve_flat(component, document=document)
