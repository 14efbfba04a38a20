"""Exception types raised by the build pipeline"""


class MalformedFrontMatter(ValueError):
    """Front matter opens with a delimiter but never closes, or is not a mapping."""


class ConversionFailed(RuntimeError):
    """Markdown-to-HTML conversion raised for a single document."""


class BuildError(RuntimeError):
    """Structural failure; the whole build is invalid."""


class NoDocumentsError(BuildError):
    pass


class DuplicateDocumentError(BuildError):
    pass


class ComposeError(BuildError):
    pass
