import re


def slugify(text: str) -> str:
    """Create URL-safe slug from text."""
    # Lowercase, replace spaces with hyphens, remove non-alphanumeric
    slug = text.lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")
