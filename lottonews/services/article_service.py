"""Service layer for article use-cases."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from lottonews.models.article import Article
from lottonews.repositories.article_repository import ArticleRepository

logger = logging.getLogger(__name__)


class ArticleService:
    """Article use-cases."""

    def __init__(self, repository: ArticleRepository | None = None) -> None:
        self._repo = repository or ArticleRepository()

    def list_articles(self, session: Session) -> Sequence[Article]:
        return self._repo.list_articles(session)

    def create_article(self, session: Session, *, title: str, content: str, image: str | None = None) -> Article:
        article = self._repo.create(session, title=title, content=content, image=image)
        logger.info("Created article %s", article.id)
        return article
