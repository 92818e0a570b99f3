# blogapi/routes/post_routes.py
from flask import Blueprint, g, request

from blogapi.auth.decorators import login_required
from blogapi.services import posts
from blogapi.utils.pagination import pagination_args, pagination_meta
from blogapi.utils.responses import request_payload, success

post_bp = Blueprint("posts", __name__)

# Nombres aceptados para el archivo de la imagen destacada
IMAGE_FIELDS = ("featuredImage", "featured_image", "image", "file")


def uploaded_image():
    for field in IMAGE_FIELDS:
        file = request.files.get(field)
        if file and file.filename:
            return file
    return None


# 🟣 Listar posts (paginado + filtros opcionales)
@post_bp.route("", methods=["GET"])
def get_posts():
    page, limit = pagination_args(request.args)
    items, total = posts.list_posts(
        page,
        limit,
        category=request.args.get("category", type=str),
        search=request.args.get("search", type=str),
        sort=request.args.get("sort", posts.DEFAULT_SORT, type=str),
    )
    return success(
        [p.to_dict() for p in items],
        pagination=pagination_meta(page, limit, total),
    )


# 🔎 Búsqueda pública (máximo 20 resultados)
@post_bp.route("/search", methods=["GET"])
def search_posts():
    items = posts.search_posts(request.args.get("q", type=str))
    return success([p.to_dict() for p in items])


@post_bp.route("/mine", methods=["GET"])
@login_required
def get_my_posts():
    page, limit = pagination_args(request.args)
    items, total = posts.list_own_posts(g.current_user, page, limit)
    return success(
        [p.to_dict() for p in items],
        pagination=pagination_meta(page, limit, total),
    )


# 🔵 Ver un solo post (por ID o slug)
@post_bp.route("/<string:identifier>", methods=["GET"])
def get_post_detail(identifier):
    post = posts.get_post(identifier)
    return success(post.to_dict(with_comments=True))


# 🟢 Crear un nuevo post
@post_bp.route("", methods=["POST"])
@login_required
def create_post():
    post = posts.create_post(g.current_user, request_payload(), uploaded_image())
    return success(post.to_dict(), status=201)


# 🟡 Editar post (solo dueño o admin)
@post_bp.route("/<string:post_id>", methods=["PUT"])
@login_required
def edit_post(post_id):
    post = posts.update_post(g.current_user, post_id, request_payload(), uploaded_image())
    return success(post.to_dict())


# 🔴 Borrar post (dueño o admin)
@post_bp.route("/<string:post_id>", methods=["DELETE"])
@login_required
def delete_post(post_id):
    posts.delete_post(g.current_user, post_id)
    return success(message="Post deleted successfully")


@post_bp.route("/<string:post_id>/comments", methods=["GET"])
def get_comments(post_id):
    return success([c.to_dict() for c in posts.list_comments(post_id)])


@post_bp.route("/<string:post_id>/comments", methods=["POST"])
@login_required
def add_comment(post_id):
    comments = posts.add_comment(post_id, g.current_user, request_payload().get("content"))
    return success([c.to_dict() for c in comments], status=201)
