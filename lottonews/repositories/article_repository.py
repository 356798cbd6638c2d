"""Repository layer for Article persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from lottonews.models.article import Article


class ArticleRepository:
    """CRUD operations for Article."""

    def list_articles(self, session: Session) -> Sequence[Article]:
        stmt = select(Article).order_by(Article.created_at.desc(), Article.id.desc())
        return list(session.scalars(stmt).all())

    def create(self, session: Session, *, title: str, content: str, image: str | None = None) -> Article:
        article = Article(title=title, content=content, image=image)
        session.add(article)
        session.flush()  # assign PK
        return article
