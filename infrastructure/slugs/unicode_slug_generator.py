"""Slug generation based on Unicode normalisation.

"My Test Slug" becomes "my-test-slug"; accented letters are folded to their
ASCII base ("Crème Brûlée" -> "creme-brulee") and everything else outside
[a-z0-9] collapses into single hyphens.
"""

from __future__ import annotations

import re
import unicodedata

from application.ports.slug_generator import SlugGenerator

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


class UnicodeSlugGenerator(SlugGenerator):
    def __init__(self, *, fallback: str = "file", max_length: int | None = None) -> None:
        self.fallback = fallback
        self.max_length = max_length

    def generate_slug(self, text: str) -> str:
        normalized = unicodedata.normalize("NFKD", text or "")
        ascii_value = normalized.encode("ascii", "ignore").decode("ascii").lower()
        slug = _NON_SLUG_RE.sub("-", ascii_value).strip("-")
        if self.max_length:
            slug = slug[: self.max_length].rstrip("-")
        return slug or self.fallback
