# blogapi/utils/content_rules.py
import math
import re

from slugify import slugify

EXCERPT_LENGTH = 200
EXCERPT_MARKER = "..."
TITLE_MAX_LENGTH = 100
SLUG_MAX_LENGTH = 255
WORDS_PER_MINUTE = 200

# Rutas fijas bajo /posts que un slug no puede tapar
RESERVED_SLUGS = {"search", "mine"}

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

TRUTHY = {"true", "1", "on", "yes"}


def make_excerpt(content):
    """Primeros 200 caracteres del contenido + '...' si hubo que cortar."""
    content = content or ""
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH] + EXCERPT_MARKER


def parse_tags(raw):
    """
    Normaliza las etiquetas: string separado por comas (o lista),
    recorta espacios, descarta vacías, conserva orden y duplicados.
    """
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        parts = [str(item) for item in raw]
    else:
        parts = str(raw).split(",")
    return [tag.strip() for tag in parts if tag.strip()]


def parse_bool(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY


def base_slug(title):
    slug = slugify(title or "")
    if not slug:
        slug = "post"
    # 🔢 un slug solo numérico se confundiría con un id
    if slug.isdigit():
        slug = f"post-{slug}"
    return slug


def is_valid_slug(slug):
    return bool(SLUG_PATTERN.match(slug)) and not slug.isdigit() and slug not in RESERVED_SLUGS


def count_words(content):
    return len((content or "").split())


def reading_time(word_count):
    if word_count <= 0:
        return 0
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))
