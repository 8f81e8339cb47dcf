# blogforge/utils/slug.py

import re
from typing import Callable

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

DEFAULT_SLUG = "article"


def slugify(title: str) -> str:
    """'Hello, World!' -> 'hello-world'."""
    slug = _NON_ALNUM.sub("-", (title or "").lower()).strip("-")
    return slug or DEFAULT_SLUG


def unique_slug(title: str, is_taken: Callable[[str], bool]) -> str:
    """Slug for title, suffixed -1, -2, ... until is_taken says it is free."""
    base = slugify(title)
    candidate = base
    counter = 1
    while is_taken(candidate):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
