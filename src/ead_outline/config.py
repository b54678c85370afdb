"""Configuration constants for ead-outline."""

import os

# EAD 2002 namespace. Documents without a namespace are moved into it on load.
EAD_NAMESPACE: str = "urn:isbn:1-931666-22-9"

NAMESPACES: dict[str, str] = {"ead": EAD_NAMESPACE}

# Local names of component elements, in the order they are queried.
COMPONENT_TAGS: tuple[str, ...] = ("c", *(f"c{n:02d}" for n in range(1, 13)))

# Documents use one leveling scheme or the other; the union tolerates either.
TOP_LEVEL_COMPONENT_XPATH: str = "//ead:dsc/ead:c | //ead:dsc/ead:c01"

CHILD_COMPONENT_XPATH: str = " | ".join(f"ead:{tag}" for tag in COMPONENT_TAGS)

# Levels kept by the container list outline.
SERIES_LEVELS: frozenset[str] = frozenset({"series", "subseries"})

# Keeps container list ids apart from the main outline's ids in one widget.
CONTAINER_LIST_ID_PREFIX: str = "container_list_"

# Prefix of generated ids for components without an id attribute. The colon
# cannot occur in an xs:ID, so generated ids never equal a declared one.
GENERATED_ID_PREFIX: str = "component:"

DEFAULT_HREF_TEMPLATE: str = "/objects/{object_id}/container-list#{node_id}"

# Seconds to wait for a remote finding aid.
HTTP_TIMEOUT: float = 30.0


def resolve_href_template() -> str:
    """Return the container list link template, honouring EAD_OUTLINE_HREF_TEMPLATE."""
    return os.environ.get("EAD_OUTLINE_HREF_TEMPLATE") or DEFAULT_HREF_TEMPLATE
