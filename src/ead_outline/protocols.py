"""Protocols for dependency injection of finding aid sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentSource(Protocol):
    """Anything that can hand over the raw bytes of an EAD document."""

    def read(self) -> bytes:
        """Return the EAD XML."""
        ...
