# blogapi/utils/pagination.py
import math

from flask import current_app

# mayor offset que entra en un BIGINT con signo
MAX_OFFSET = 2 ** 63 - 1


def page_count(total, limit):
    return math.ceil(total / limit) if limit else 0


def pagination_args(args):
    """
    Lee ``page`` y ``limit`` de los query params. Valores mal formados
    o fuera de rango vuelven a los valores por defecto.
    """
    default_limit = current_app.config["DEFAULT_PAGE_SIZE"]
    max_limit = current_app.config["MAX_PAGE_SIZE"]

    page = args.get("page", 1, type=int)
    limit = args.get("limit", default_limit, type=int)

    if limit < 1:
        limit = default_limit
    limit = min(limit, max_limit)
    # una página cuyo offset no entra en la base se trata como mal formada
    if page < 1 or (page - 1) * limit > MAX_OFFSET:
        page = 1
    return page, limit


def pagination_meta(page, limit, total):
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": page_count(total, limit),
    }
