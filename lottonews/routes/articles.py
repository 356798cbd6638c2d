"""Article routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy.exc import SQLAlchemyError

from lottonews.db import get_session
from lottonews.schemas.article import ArticleCreateSchema, ArticleSchema
from lottonews.services.article_service import ArticleService
from lottonews.services.upload_service import UploadService
from lottonews.utils.payloads import get_payload
from lottonews.utils.responses import ok

articles_bp = Blueprint("articles", __name__)

_article_schema = ArticleSchema()
_articles_schema = ArticleSchema(many=True)
_create_schema = ArticleCreateSchema()
_service = ArticleService()


@articles_bp.get("/articles")
def list_articles():
    """List all articles, newest first."""

    session = get_session()
    return ok(_articles_schema.dump(_service.list_articles(session)))


@articles_bp.post("/articles")
def create_article():
    """Create an article from form fields (optionally with an ``image`` file) or JSON."""

    data = _create_schema.load(get_payload())

    uploads = UploadService(current_app.config["PUBLIC_DIR"], current_app.config["UPLOAD_SUBDIR"])
    image = uploads.save(request.files.get("image"), "image")

    session = get_session()
    try:
        article = _service.create_article(
            session,
            title=str(data["title"]),
            content=str(data["content"]),
            image=image,
        )
        session.commit()
    except SQLAlchemyError:
        uploads.discard(image)
        raise
    return ok(_article_schema.dump(article))
