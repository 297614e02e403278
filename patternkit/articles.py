"""In-memory article storage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    id: int
    title: str
    content: str


class ArticleStore:
    """Keeps articles in creation order, numbering them from 1."""

    def __init__(self) -> None:
        self._articles: list[Article] = []
        self._next_id = 1

    def create(self, title: str, content: str) -> Article:
        if not title:
            raise ValueError("title cannot be empty")
        article = Article(id=self._next_id, title=title, content=content)
        self._next_id += 1
        self._articles.append(article)
        return article

    def all(self) -> list[Article]:
        return list(self._articles)