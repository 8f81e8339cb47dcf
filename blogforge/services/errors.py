# blogforge/services/errors.py


class InputError(ValueError):
    """Missing or empty keyword/title; nothing was sent to the model."""


class ArticleGenerationError(RuntimeError):
    """Base for every generation failure. Routes turn it into one generic 500."""


class GenerationError(ArticleGenerationError):
    """The model call itself failed (API, network, timeout, empty reply)."""


class EmptyResultError(ArticleGenerationError):
    """The model answered but nothing usable survived parsing."""


class ComplianceError(ArticleGenerationError):
    """Mandatory promotional mentions still missing after the retry."""


class ArticleNotFoundError(LookupError):
    pass
