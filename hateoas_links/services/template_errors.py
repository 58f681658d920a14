from __future__ import annotations


class UrlTemplateError(Exception):
    pass


class SubResourceOrderError(UrlTemplateError):
    def __init__(self, missing: str):
        self.missing = missing
        super().__init__(
            f'Optional subresources must be provided from left to right. "{missing}" is missing.'
        )


class UnresolvedPlaceholderError(UrlTemplateError):
    def __init__(self, placeholders: list[str], url: str):
        self.placeholders = list(placeholders)
        self.url = url
        names = ", ".join(self.placeholders)
        super().__init__(f"Some parameters ({names}) must be supplied in URL ({url})")
