"""
Tests for article persistence and slug handling.
"""

from unittest.mock import MagicMock

import pytest

from blogforge.services.article_pipeline import fixed_seo_score
from blogforge.services.article_store import FirestoreArticleStore, build_article_store, InMemoryArticleStore
from blogforge.services.errors import ArticleNotFoundError
from blogforge.utils.slug import slugify, unique_slug


def _data(title="Hello World", content="Body text", author="user-1"):
    return {
        "title": title,
        "content": content,
        "keywords": ["hello"],
        "seoScore": fixed_seo_score().model_dump(),
        "authorId": author,
    }


class TestSlugs:

    @pytest.mark.parametrize("title,expected", [
        ("Hello World", "hello-world"),
        ("  Hello,   World!  ", "hello-world"),
        ("5 Coffee Tips (2024)", "5-coffee-tips-2024"),
        ("!!!", "article"),
        ("", "article"),
    ])
    def test_slugify(self, title, expected):
        assert slugify(title) == expected

    def test_unique_slug_appends_counter(self):
        taken = {"hello-world", "hello-world-1"}
        assert unique_slug("Hello World", taken.__contains__) == "hello-world-2"


class TestInMemoryArticleStore:

    def test_duplicate_titles_get_unique_slugs(self, store):
        first = store.create_article(_data())
        second = store.create_article(_data())
        third = store.create_article(_data())
        assert [first.slug, second.slug, third.slug] == ["hello-world", "hello-world-1", "hello-world-2"]

    def test_create_assigns_id_and_timestamp(self, store):
        article = store.create_article(_data())
        assert article.id == "1"
        assert article.created_at is not None
        assert article.seo_score.score == 85

    def test_lookup_by_id_and_slug(self, store):
        created = store.create_article(_data())
        assert store.get_article(created.id).title == "Hello World"
        assert store.get_article_by_slug("hello-world").id == created.id
        assert store.get_article("999") is None
        assert store.get_article_by_slug("missing") is None

    def test_newest_first(self, store):
        store.create_article(_data(title="Old"))
        store.create_article(_data(title="New"))
        assert [article.title for article in store.get_articles()] == ["New", "Old"]

    def test_update_reslugs_on_title_change(self, store):
        store.create_article(_data(title="Taken"))
        article = store.create_article(_data(title="Original"))
        updated = store.update_article(article.id, {"title": "Taken", "content": "New body"})
        assert updated.slug == "taken-1"
        assert updated.content == "New body"
        assert updated.author_id == "user-1"

    def test_update_keeps_slug_when_title_unchanged(self, store):
        article = store.create_article(_data())
        assert store.update_article(article.id, {"content": "Changed"}).slug == "hello-world"

    def test_update_ignores_immutable_fields(self, store):
        article = store.create_article(_data())
        updated = store.update_article(article.id, {"authorId": "intruder", "id": "42"})
        assert updated.author_id == "user-1"
        assert updated.id == article.id

    def test_update_missing(self, store):
        with pytest.raises(ArticleNotFoundError):
            store.update_article("404", {"title": "x"})

    def test_delete(self, store):
        article = store.create_article(_data())
        store.delete_article(article.id)
        assert store.get_article(article.id) is None
        # slug is free again
        assert store.create_article(_data()).slug == "hello-world"

    def test_by_author(self, store):
        store.create_article(_data(author="a"))
        store.create_article(_data(author="b"))
        assert [article.author_id for article in store.get_articles_by_author("a")] == ["a"]

    def test_search_is_case_insensitive_over_title_and_body(self, store):
        store.create_article(_data(title="Coffee Basics", content="All about beans"))
        store.create_article(_data(title="Tea Time", content="Nothing about COFFEE here? Yes, coffee."))
        store.create_article(_data(title="Gardening", content="Soil"))
        assert {article.title for article in store.search_articles("cOfFeE")} == {"Coffee Basics", "Tea Time"}
        assert store.search_articles("   ") == []

    def test_users(self, store):
        assert store.get_user("u1") is None
        profile = store.upsert_user("u1", {"displayName": "Ann", "ignored": "x"})
        assert profile.display_name == "Ann"
        profile = store.upsert_user("u1", {"blogTitle": "Ann's Blog"})
        assert profile.display_name == "Ann"
        assert store.get_user("u1").blog_title == "Ann's Blog"


class TestFirestoreArticleStore:

    @pytest.fixture
    def db(self):
        return MagicMock()

    def test_create_article_writes_payload_with_unique_slug(self, db):
        articles = db.collection.return_value
        taken = MagicMock(id="other")
        # "hello-world" is taken, "hello-world-1" is free
        articles.where.return_value.limit.return_value.stream.side_effect = [iter([taken]), iter([])]
        articles.document.return_value.id = "doc-1"

        article = FirestoreArticleStore(db).create_article(_data())

        db.collection.assert_called_with("articles")
        payload = articles.document.return_value.set.call_args.args[0]
        assert payload["slug"] == "hello-world-1"
        assert payload["authorId"] == "user-1"
        assert article.id == "doc-1"
        assert article.slug == "hello-world-1"

    def test_get_article_missing(self, db):
        db.collection.return_value.document.return_value.get.return_value.exists = False
        assert FirestoreArticleStore(db).get_article("nope") is None

    def test_update_missing_raises(self, db):
        db.collection.return_value.document.return_value.get.return_value.exists = False
        with pytest.raises(ArticleNotFoundError):
            FirestoreArticleStore(db).update_article("nope", {"title": "x"})


def test_build_article_store():
    assert isinstance(build_article_store("memory"), InMemoryArticleStore)
    assert isinstance(build_article_store("firestore"), FirestoreArticleStore)
    with pytest.raises(ValueError):
        build_article_store("postgres")
