"""Exceptions raised at the boundaries of ead-outline."""


class EadError(ValueError):
    """Base class for finding aid errors."""


class EadParseError(EadError):
    """The source is not well-formed XML."""


class EadRenderError(EadError):
    """The HTML stylesheet failed on a document."""


class EadSourceError(EadError):
    """A finding aid could not be read from its source."""
