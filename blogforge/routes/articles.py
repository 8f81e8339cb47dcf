import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from blogforge.core.config import GENERATION_RATE_LIMIT
from blogforge.routes.dependencies import get_article_store, get_pipeline
from blogforge.schemas.articles import (
    Article,
    ArticleCreate,
    ArticleSearchResult,
    ArticleUpdate,
    GenerateArticleRequest,
    IdeasRequest,
)
from blogforge.services.article_pipeline import ArticlePipeline, fixed_seo_score
from blogforge.services.article_store import ArticleStore
from blogforge.services.errors import ArticleGenerationError, ArticleNotFoundError, InputError
from blogforge.utils.auth import current_user_id, verify_token
from blogforge.utils.response_parser import clean_content, clean_keywords, plain_excerpt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])
limiter = Limiter(key_func=get_remote_address)


# Per-user rate limit key function
def get_user_key(request: Request) -> str:
    """Caller uid recorded by ``generation_user``; remote address otherwise."""
    uid = getattr(request.state, "uid", None)
    return f"user:{uid}" if uid else get_remote_address(request)


def generation_user(request: Request, token_data: dict = Depends(verify_token)) -> dict:
    """verify_token, plus the uid stashed on the request for the limiter."""
    request.state.uid = current_user_id(token_data)
    return token_data


IDEAS_FAILED = "Failed to generate article ideas"
CONTENT_FAILED = "Failed to generate article content"


def present(article: Article) -> Article:
    """Clean stored content again on the way out."""
    return article.model_copy(
        update={
            "content": clean_content(article.content),
            "keywords": clean_keywords(article.keywords),
        }
    )


def _owned_article(store: ArticleStore, article_id: str, uid: str) -> Article:
    article = store.get_article(article_id)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    if article.author_id != uid:
        raise HTTPException(status_code=403, detail="Not authorized")
    return article


# -------------------------------------------------
# Generation
# -------------------------------------------------
@router.post("/ideas", response_model=List[str])
@limiter.limit(GENERATION_RATE_LIMIT, key_func=get_user_key)
def generate_ideas(
    request: Request,
    body: IdeasRequest,
    token_data: dict = Depends(generation_user),
    pipeline: ArticlePipeline = Depends(get_pipeline),
):
    """Generate up to five title ideas for a keyword."""
    try:
        return pipeline.generate_article_ideas(body.keyword, body.preferences)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ArticleGenerationError:
        logger.exception("Idea generation failed for user %s", token_data.get("uid"))
        raise HTTPException(status_code=500, detail=IDEAS_FAILED)


@router.post("/generate", response_model=Article, status_code=201)
@limiter.limit(GENERATION_RATE_LIMIT, key_func=get_user_key)
def generate_article(
    request: Request,
    body: GenerateArticleRequest,
    token_data: dict = Depends(generation_user),
    pipeline: ArticlePipeline = Depends(get_pipeline),
    store: ArticleStore = Depends(get_article_store),
):
    """Generate a full article and publish it to the caller's blog."""
    uid = current_user_id(token_data)
    try:
        generated = pipeline.generate_article_content(body.title, body.keyword, body.preferences)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ArticleGenerationError:
        logger.exception("Article generation failed for user %s", uid)
        raise HTTPException(status_code=500, detail=CONTENT_FAILED)

    article = store.create_article({
        "title": body.title.strip(),
        "content": generated.content,
        "keywords": generated.keywords,
        "seoScore": generated.seo_score.model_dump(),
        "authorId": uid,
    })
    return present(article)


# -------------------------------------------------
# CRUD
# -------------------------------------------------
@router.get("/search/{query}", response_model=List[ArticleSearchResult])
def search_articles(query: str, store: ArticleStore = Depends(get_article_store)):
    results = []
    for article in store.search_articles(query):
        cleaned = present(article)
        results.append(ArticleSearchResult(**cleaned.model_dump(), excerpt=plain_excerpt(cleaned.content)))
    return results


@router.get("", response_model=List[Article])
def list_articles(
    author_id: Optional[str] = Query(default=None, alias="authorId"),
    store: ArticleStore = Depends(get_article_store),
):
    articles = store.get_articles_by_author(author_id) if author_id else store.get_articles()
    return [present(article) for article in articles]


@router.post("", response_model=Article, status_code=201)
def create_article(
    body: ArticleCreate,
    token_data: dict = Depends(verify_token),
    store: ArticleStore = Depends(get_article_store),
):
    uid = current_user_id(token_data)
    title = (body.title or "").strip()
    content = (body.content or "").strip()
    if not title or not content:
        raise HTTPException(status_code=400, detail="title and content are required")

    seo_score = body.seo_score or fixed_seo_score()
    article = store.create_article({
        "title": title,
        "content": content,
        "keywords": clean_keywords(body.keywords),
        "seoScore": seo_score.model_dump(),
        "authorId": uid,
    })
    return present(article)


@router.get("/{slug}", response_model=Article)
def get_article(slug: str, store: ArticleStore = Depends(get_article_store)):
    article = store.get_article_by_slug(slug)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return present(article)


@router.put("/{article_id}", response_model=Article)
def update_article(
    article_id: str,
    body: ArticleUpdate,
    token_data: dict = Depends(verify_token),
    store: ArticleStore = Depends(get_article_store),
):
    uid = current_user_id(token_data)
    _owned_article(store, article_id, uid)

    data = body.model_dump(by_alias=True, exclude_none=True)
    for field in ("title", "content"):
        if field in data:
            data[field] = data[field].strip()
            if not data[field]:
                raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
    if "keywords" in data:
        data["keywords"] = clean_keywords(data["keywords"])

    try:
        return present(store.update_article(article_id, data))
    except ArticleNotFoundError:
        raise HTTPException(status_code=404, detail="Article not found")


@router.delete("/{article_id}", status_code=204)
def delete_article(
    article_id: str,
    token_data: dict = Depends(verify_token),
    store: ArticleStore = Depends(get_article_store),
):
    uid = current_user_id(token_data)
    _owned_article(store, article_id, uid)
    store.delete_article(article_id)
    return Response(status_code=204)
