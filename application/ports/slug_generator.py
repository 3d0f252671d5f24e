from typing import Protocol


class SlugGenerator(Protocol):
    """Port turning arbitrary text into a URL-safe, lowercase, hyphenated token.

    Deterministic for a given input; no uniqueness guarantee across calls.
    """

    def generate_slug(self, text: str) -> str: ...
