"""Navigation outlines and HTML renderings of EAD finding aids."""

from ead_outline.core.containers import SkippedReference, resolve_containers
from ead_outline.core.document import EadDocument, load_ead, parse_ead
from ead_outline.core.render.html import render_finding_aid_html
from ead_outline.core.tree.builder import build_component_tree
from ead_outline.core.tree.series import build_series_tree
from ead_outline.errors import EadError, EadParseError, EadRenderError, EadSourceError
from ead_outline.models.node import ContainerEntry, ContainerSummary, DisplayNode

__all__ = [
    "ContainerEntry",
    "ContainerSummary",
    "DisplayNode",
    "EadDocument",
    "EadError",
    "EadParseError",
    "EadRenderError",
    "EadSourceError",
    "SkippedReference",
    "build_component_tree",
    "build_series_tree",
    "load_ead",
    "parse_ead",
    "render_finding_aid_html",
    "resolve_containers",
]
