"""Load-time errors raised while building a content index"""


class LoadError(ValueError):
    """Base error for content that cannot be loaded.

    Carries the offending document (its path relative to the content root)
    and, where one applies, the frontmatter field at fault.
    """

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        self.reason = message
        parts = []
        if source:
            parts.append(source)
        if field:
            parts.append(f"field '{field}'")
        prefix = ", ".join(parts)
        super().__init__(f"{prefix}: {message}" if prefix else message)


class FrontmatterError(LoadError):
    pass


class MissingFieldError(LoadError):
    pass


class InvalidFieldError(LoadError):
    pass


class InvalidDateError(LoadError):
    pass


class DuplicateSlugError(LoadError):
    pass
