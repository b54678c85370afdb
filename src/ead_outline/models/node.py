"""Display models produced from an EAD finding aid."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ContainerEntry:
    """A single container element (box, folder, ...) of a summary."""

    id: str
    value: str
    locator: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "value": self.value, "locator": self.locator}


@dataclass(frozen=True)
class ContainerSummary:
    """A group of containers describing one physical location."""

    text: str
    entries: dict[str, ContainerEntry] = field(default_factory=dict)

    def to_widget(self) -> dict[str, Any]:
        """Serialize as a leaf record of the outline widget."""
        return {
            "text": self.text,
            "type": "container",
            "children": [],
            "containers": {label: entry.to_dict() for label, entry in self.entries.items()},
        }


@dataclass(frozen=True)
class DisplayNode:
    """A component of the finding aid as shown in the outline widget."""

    id: str
    text: str
    type: str
    children: tuple["DisplayNode", ...] = ()
    containers: tuple[ContainerSummary, ...] = ()
    locator: str = ""
    href: str | None = None

    def to_widget(self) -> dict[str, Any]:
        """Serialize for a JSON outline widget.

        Child components come first, followed by the resolved containers,
        which are tagged with ``type == "container"``.
        """
        a_attr: dict[str, str] = {"path": self.locator}
        if self.href is not None:
            a_attr["href"] = self.href
        return {
            "id": self.id,
            "text": self.text,
            "type": self.type,
            "children": [
                *(child.to_widget() for child in self.children),
                *(summary.to_widget() for summary in self.containers),
            ],
            "a_attr": a_attr,
        }


def to_widget_tree(nodes: list[DisplayNode]) -> list[dict[str, Any]]:
    """Serialize a list of top-level nodes."""
    return [node.to_widget() for node in nodes]
