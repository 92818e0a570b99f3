# blogapi/services/posts.py
"""
Reglas de negocio de posts y comentarios.

Las rutas solo parsean el request y dan forma a la respuesta; todo lo que
toca la base (filtros, paginado, slugs, excerpt, permisos) vive aquí.
"""
from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from blogapi.errors import Forbidden, NotFound, ValidationError
from blogapi.extensions import db
from blogapi.models import Category, Comment, Post
from blogapi.models.comment import COMMENT_MAX_LENGTH
from blogapi.utils.content_rules import (
    EXCERPT_LENGTH,
    RESERVED_SLUGS,
    SLUG_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    base_slug,
    is_valid_slug,
    make_excerpt,
    parse_bool,
    parse_tags,
)
from blogapi.utils.storage import delete_upload, save_upload

SORTS = {
    "newest": (Post.created_at.desc(), Post.id.desc()),
    "oldest": (Post.created_at.asc(), Post.id.asc()),
    "popular": (Post.views.desc(), Post.id.desc()),
    "title": (Post.title.asc(), Post.id.asc()),
}
DEFAULT_SORT = "newest"
MAX_ID = 2 ** 63 - 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _parse_id(value):
    value = str(value or "").strip()
    if not value.isdecimal():
        return None
    pk = int(value)
    # fuera del rango de un INTEGER de la base no puede existir
    return pk if pk <= MAX_ID else None


def _get_post_or_404(post_id):
    pk = _parse_id(post_id)
    post = db.session.get(Post, pk) if pk is not None else None
    if post is None:
        raise NotFound("Post not found")
    return post


def _like_pattern(term):
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_filter(term):
    """Substring sin distinguir mayúsculas sobre título, contenido o etiquetas."""
    pattern = _like_pattern(term)
    return or_(
        Post.title.ilike(pattern, escape="\\"),
        Post.content.ilike(pattern, escape="\\"),
        Post.tags_text.ilike(pattern, escape="\\"),
    )


def _category_filter(value):
    pk = _parse_id(value)
    if pk is not None:
        return Post.category_id == pk
    return Post.category.has(Category.name == str(value).strip())


def _slug_taken(slug, exclude_id=None):
    query = Post.query.filter(Post.slug == slug)
    if exclude_id is not None:
        query = query.filter(Post.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def generate_unique_slug(title, exclude_id=None):
    """Genera un slug único agregando un sufijo numérico si ya existe"""
    base = base_slug(title)
    slug = base
    i = 1
    while slug in RESERVED_SLUGS or _slug_taken(slug, exclude_id):
        slug = f"{base}-{i}"
        i += 1
    return slug


def _resolve_category(value):
    pk = _parse_id(value)
    return db.session.get(Category, pk) if pk is not None else None


def _clean_post_fields(fields, post=None):
    """
    Valida los campos de creación/edición. En edición (``post`` dado) solo se
    validan los campos presentes. Lanza ValidationError con todos los errores.
    """
    creating = post is None
    errors = {}
    clean = {}

    if creating or "title" in fields:
        title = str(fields.get("title") or "").strip()
        if not title:
            errors["title"] = "Title is required"
        elif len(title) > TITLE_MAX_LENGTH:
            errors["title"] = f"Title cannot be more than {TITLE_MAX_LENGTH} characters"
        else:
            clean["title"] = title

    if creating or "content" in fields:
        content = str(fields.get("content") or "")
        if not content.strip():
            errors["content"] = "Content is required"
        else:
            clean["content"] = content

    if creating or "category" in fields:
        category = _resolve_category(fields.get("category"))
        if category is None:
            errors["category"] = "Valid category ID is required"
        else:
            clean["category"] = category

    if fields.get("excerpt"):
        excerpt = str(fields["excerpt"])
        if len(excerpt) > EXCERPT_LENGTH:
            errors["excerpt"] = f"Excerpt cannot be more than {EXCERPT_LENGTH} characters"
        else:
            clean["excerpt"] = excerpt

    if fields.get("slug"):
        slug = str(fields["slug"]).strip()
        if len(slug) > SLUG_MAX_LENGTH:
            errors["slug"] = f"Slug cannot be more than {SLUG_MAX_LENGTH} characters"
        elif not is_valid_slug(slug):
            errors["slug"] = "Slug can only contain lowercase letters, numbers, and hyphens"
        elif _slug_taken(slug, exclude_id=None if creating else post.id):
            errors["slug"] = "Slug already in use"
        else:
            clean["slug"] = slug

    if "tags" in fields:
        clean["tags"] = parse_tags(fields["tags"])

    for key in ("isPublished", "is_published"):
        if key in fields:
            clean["is_published"] = parse_bool(fields[key])
            break

    if errors:
        raise ValidationError.from_fields(errors)
    return clean


def _commit_post():
    try:
        db.session.commit()
    except IntegrityError:
        # carrera entre dos posts con el mismo slug
        db.session.rollback()
        raise ValidationError.from_fields({"slug": "Slug already in use"})


# ---------------------------------------------------------------------------
# Lectura
# ---------------------------------------------------------------------------
def list_posts(page, limit, category=None, search=None, sort=DEFAULT_SORT):
    """Posts publicados, filtrados y paginados. Devuelve ``(items, total)``."""
    query = Post.query.filter(Post.is_published.is_(True))

    if category:
        query = query.filter(_category_filter(category))
    search = (search or "").strip()
    if search:
        query = query.filter(search_filter(search))

    order = SORTS.get(sort, SORTS[DEFAULT_SORT])
    pagination = query.order_by(*order).paginate(page=page, per_page=limit, error_out=False)
    return pagination.items, pagination.total


def list_own_posts(user, page, limit):
    # Si es admin, puede ver todos los posts
    if user.is_admin:
        query = Post.query
    else:
        query = Post.query.filter_by(author_id=user.id)

    pagination = query.order_by(*SORTS[DEFAULT_SORT]).paginate(page=page, per_page=limit, error_out=False)
    return pagination.items, pagination.total


def search_posts(q):
    q = (q or "").strip()
    if not q:
        raise ValidationError.from_fields({"q": "Search query is required"}, "Search query is required")

    return (
        Post.query.filter(Post.is_published.is_(True), search_filter(q))
        .order_by(*SORTS[DEFAULT_SORT])
        .limit(current_app.config["SEARCH_RESULT_LIMIT"])
        .all()
    )


def get_post(identifier):
    """
    Busca por id (si parece un id) y si no por slug, e incrementa las visitas.
    El incremento es un UPDATE atómico sobre la fila.
    """
    post = None
    pk = _parse_id(identifier)
    if pk is not None:
        post = db.session.get(Post, pk)
    if post is None:
        post = Post.query.filter_by(slug=identifier).first()
    if post is None:
        raise NotFound("Post not found")

    Post.query.filter_by(id=post.id).update(
        {Post.views: Post.views + 1, Post.updated_at: Post.updated_at},
        synchronize_session=False,
    )
    db.session.commit()
    return post


# ---------------------------------------------------------------------------
# Escritura
# ---------------------------------------------------------------------------
def create_post(author, fields, image=None):
    clean = _clean_post_fields(fields)

    post = Post(
        title=clean["title"],
        content=clean["content"],
        category_id=clean["category"].id,
        author_id=author.id,
        tags=clean.get("tags", []),
        is_published=clean.get("is_published", False),
    )
    post.slug = clean.get("slug") or generate_unique_slug(post.title)
    post.excerpt = clean.get("excerpt") or make_excerpt(post.content)

    # La imagen se guarda antes del commit; si el commit falla queda huérfana
    if image is not None:
        stored = save_upload(image)
        post.featured_image = stored.path
        post.featured_image_public_id = stored.public_id

    db.session.add(post)
    _commit_post()
    current_app.logger.info("📝 Post creado: %s (id=%s) por %s", post.slug, post.id, author.username)
    return post


def update_post(actor, post_id, fields, image=None):
    post = _get_post_or_404(post_id)

    # 🔒 Validar permisos: dueño o admin
    if not post.can_be_modified_by(actor):
        raise Forbidden("Not authorized to update this post")

    clean = _clean_post_fields(fields, post)
    old_content = post.content

    if "title" in clean:
        if clean["title"] != post.title and "slug" not in clean:
            post.slug = generate_unique_slug(clean["title"], exclude_id=post.id)
        post.title = clean["title"]
    if "slug" in clean:
        post.slug = clean["slug"]
    if "content" in clean:
        post.content = clean["content"]
    if "category" in clean:
        post.category_id = clean["category"].id
    if "tags" in clean:
        post.tags = clean["tags"]
    if "is_published" in clean:
        post.is_published = clean["is_published"]

    if "excerpt" in clean:
        post.excerpt = clean["excerpt"]
    elif post.content != old_content:
        post.excerpt = make_excerpt(post.content)

    previous_image = None
    if image is not None:
        stored = save_upload(image)
        previous_image = (post.featured_image, post.featured_image_public_id)
        post.featured_image = stored.path
        post.featured_image_public_id = stored.public_id

    _commit_post()

    if previous_image and previous_image[0]:
        delete_upload(*previous_image)

    current_app.logger.info("✏️ Post actualizado: %s (id=%s) por %s", post.slug, post.id, actor.username)
    return post


def delete_post(actor, post_id):
    post = _get_post_or_404(post_id)

    if not post.can_be_modified_by(actor):
        raise Forbidden("Not authorized to delete this post")

    stored_image = (post.featured_image, post.featured_image_public_id)
    db.session.delete(post)
    db.session.commit()

    # 🔹 Borrar imagen destacada si existe, solo cuando el post ya no está
    if stored_image[0]:
        delete_upload(*stored_image)
    current_app.logger.info("🗑️ Post eliminado: id=%s por %s", post_id, actor.username)


# ---------------------------------------------------------------------------
# Comentarios
# ---------------------------------------------------------------------------
def list_comments(post_id):
    return list(_get_post_or_404(post_id).comments)


def add_comment(post_id, author, content):
    content = str(content or "").strip()
    if not content:
        raise ValidationError.from_fields({"content": "Comment content is required"}, "Comment content is required")
    if len(content) > COMMENT_MAX_LENGTH:
        raise ValidationError.from_fields(
            {"content": f"Comment cannot be more than {COMMENT_MAX_LENGTH} characters"}
        )

    post = _get_post_or_404(post_id)
    db.session.add(Comment(content=content, post_id=post.id, author_id=author.id))
    db.session.commit()
    return list(post.comments)
