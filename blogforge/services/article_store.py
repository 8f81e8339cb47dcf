# blogforge/services/article_store.py
"""
Article and blog-profile persistence.

FirestoreArticleStore is the production backend; InMemoryArticleStore backs
local runs (STORAGE_BACKEND=memory) and the test suite. Both accept and
return the same camelCase payloads the API exposes.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from google.cloud import firestore as gcfirestore

from blogforge.schemas.articles import Article
from blogforge.schemas.users import BlogProfile
from blogforge.services.errors import ArticleNotFoundError
from blogforge.services.firestore import get_db
from blogforge.utils.slug import unique_slug

logger = logging.getLogger(__name__)

# Fields a caller may change after creation
UPDATABLE_FIELDS = ("title", "content", "keywords", "seoScore")
PROFILE_FIELDS = ("displayName", "blogTitle", "blogDescription")


class ArticleStore(Protocol):
    def get_articles(self) -> List[Article]: ...
    def get_article(self, article_id: str) -> Optional[Article]: ...
    def get_article_by_slug(self, slug: str) -> Optional[Article]: ...
    def create_article(self, data: Dict[str, Any]) -> Article: ...
    def update_article(self, article_id: str, data: Dict[str, Any]) -> Article: ...
    def delete_article(self, article_id: str) -> None: ...
    def get_articles_by_author(self, author_id: str) -> List[Article]: ...
    def search_articles(self, query: str) -> List[Article]: ...
    def get_user(self, uid: str) -> Optional[BlogProfile]: ...
    def upsert_user(self, uid: str, data: Dict[str, Any]) -> BlogProfile: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _matches(article: Article, needle: str) -> bool:
    return needle in article.title.lower() or needle in article.content.lower()


def _updates(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: data[key] for key in UPDATABLE_FIELDS if data.get(key) is not None}


class InMemoryArticleStore:
    def __init__(self):
        self._articles: Dict[str, Dict[str, Any]] = {}
        self._users: Dict[str, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _slug_taken(self, slug: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            record["slug"] == slug and article_id != exclude_id
            for article_id, record in self._articles.items()
        )

    def get_articles(self) -> List[Article]:
        with self._lock:
            records = list(self._articles.values())
        # Newest first; ids are sequential
        records.sort(key=lambda record: int(record["id"]), reverse=True)
        return [Article(**record) for record in records]

    def get_article(self, article_id: str) -> Optional[Article]:
        record = self._articles.get(str(article_id))
        return Article(**record) if record else None

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        for record in list(self._articles.values()):
            if record["slug"] == slug:
                return Article(**record)
        return None

    def create_article(self, data: Dict[str, Any]) -> Article:
        with self._lock:
            article_id = str(self._next_id)
            self._next_id += 1
            record = {
                "id": article_id,
                "title": data["title"],
                "slug": unique_slug(data["title"], self._slug_taken),
                "content": data["content"],
                "keywords": list(data.get("keywords") or []),
                "seoScore": data["seoScore"],
                "authorId": data["authorId"],
                "createdAt": _utcnow(),
            }
            self._articles[article_id] = record
        return Article(**record)

    def update_article(self, article_id: str, data: Dict[str, Any]) -> Article:
        with self._lock:
            record = self._articles.get(str(article_id))
            if record is None:
                raise ArticleNotFoundError(f"Article {article_id} not found")
            updates = _updates(data)
            if "title" in updates and updates["title"] != record["title"]:
                updates["slug"] = unique_slug(
                    updates["title"],
                    lambda slug: self._slug_taken(slug, exclude_id=record["id"]),
                )
            record.update(updates)
            return Article(**record)

    def delete_article(self, article_id: str) -> None:
        with self._lock:
            self._articles.pop(str(article_id), None)

    def get_articles_by_author(self, author_id: str) -> List[Article]:
        return [article for article in self.get_articles() if article.author_id == author_id]

    def search_articles(self, query: str) -> List[Article]:
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [article for article in self.get_articles() if _matches(article, needle)]

    def get_user(self, uid: str) -> Optional[BlogProfile]:
        record = self._users.get(uid)
        return BlogProfile(**record) if record else None

    def upsert_user(self, uid: str, data: Dict[str, Any]) -> BlogProfile:
        with self._lock:
            record = self._users.setdefault(uid, {"uid": uid})
            record.update({key: data[key] for key in PROFILE_FIELDS if key in data})
            return BlogProfile(**record)


class FirestoreArticleStore:
    def __init__(self, db=None):
        self._db = db

    @property
    def db(self):
        if self._db is None:
            self._db = get_db()
        return self._db

    def _collection(self):
        return self.db.collection("articles")

    def _slug_taken(self, slug: str, exclude_id: Optional[str] = None) -> bool:
        docs = self._collection().where("slug", "==", slug).limit(2).stream()
        return any(doc.id != exclude_id for doc in docs)

    @staticmethod
    def _to_article(doc) -> Article:
        data = doc.to_dict() or {}
        data["id"] = doc.id
        return Article(**data)

    def get_articles(self) -> List[Article]:
        docs = self._collection().order_by("createdAt", direction=gcfirestore.Query.DESCENDING).stream()
        return [self._to_article(doc) for doc in docs]

    def get_article(self, article_id: str) -> Optional[Article]:
        doc = self._collection().document(str(article_id)).get()
        return self._to_article(doc) if doc.exists else None

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        docs = list(self._collection().where("slug", "==", slug).limit(1).stream())
        return self._to_article(docs[0]) if docs else None

    def create_article(self, data: Dict[str, Any]) -> Article:
        doc_ref = self._collection().document()
        payload = {
            "title": data["title"],
            "slug": unique_slug(data["title"], self._slug_taken),
            "content": data["content"],
            "keywords": list(data.get("keywords") or []),
            "seoScore": data["seoScore"],
            "authorId": data["authorId"],
            "createdAt": _utcnow(),
        }
        doc_ref.set(payload)
        logger.info("Created article %s slug=%s", doc_ref.id, payload["slug"])
        return Article(id=doc_ref.id, **payload)

    def update_article(self, article_id: str, data: Dict[str, Any]) -> Article:
        doc_ref = self._collection().document(str(article_id))
        doc = doc_ref.get()
        if not doc.exists:
            raise ArticleNotFoundError(f"Article {article_id} not found")

        existing = doc.to_dict() or {}
        updates = _updates(data)
        if "title" in updates and updates["title"] != existing.get("title"):
            updates["slug"] = unique_slug(
                updates["title"],
                lambda slug: self._slug_taken(slug, exclude_id=doc.id),
            )
        if updates:
            doc_ref.update(updates)
        existing.update(updates)
        existing["id"] = doc.id
        return Article(**existing)

    def delete_article(self, article_id: str) -> None:
        self._collection().document(str(article_id)).delete()

    def get_articles_by_author(self, author_id: str) -> List[Article]:
        docs = self._collection().where("authorId", "==", author_id).stream()
        articles = [self._to_article(doc) for doc in docs]
        articles.sort(key=lambda article: article.created_at, reverse=True)
        return articles

    def search_articles(self, query: str) -> List[Article]:
        # Firestore has no substring queries, so filter client-side
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [article for article in self.get_articles() if _matches(article, needle)]

    def get_user(self, uid: str) -> Optional[BlogProfile]:
        doc = self.db.collection("users").document(uid).get()
        if not doc.exists:
            return None
        data = doc.to_dict() or {}
        data["uid"] = uid
        return BlogProfile(**data)

    def upsert_user(self, uid: str, data: Dict[str, Any]) -> BlogProfile:
        user_ref = self.db.collection("users").document(uid)
        updates = {key: data[key] for key in PROFILE_FIELDS if key in data}
        updates["updatedAt"] = gcfirestore.SERVER_TIMESTAMP
        user_ref.set(updates, merge=True)
        return self.get_user(uid) or BlogProfile(uid=uid)


def build_article_store(backend: str) -> ArticleStore:
    if backend == "memory":
        logger.info("Using in-memory article store")
        return InMemoryArticleStore()
    if backend == "firestore":
        return FirestoreArticleStore()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")
