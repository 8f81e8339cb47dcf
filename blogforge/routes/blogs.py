from fastapi import APIRouter, Depends, HTTPException

from blogforge.routes.articles import present
from blogforge.routes.dependencies import get_article_store
from blogforge.schemas.users import BlogPage, BlogProfile
from blogforge.services.article_store import ArticleStore

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("/{user_id}", response_model=BlogPage)
def get_blog(user_id: str, store: ArticleStore = Depends(get_article_store)):
    """Public blog page: the author's profile and their articles, newest first."""
    profile = store.get_user(user_id)
    articles = store.get_articles_by_author(user_id)
    if profile is None and not articles:
        raise HTTPException(status_code=404, detail="Blog not found")

    return BlogPage(
        user=profile or BlogProfile(uid=user_id),
        articles=[present(article) for article in articles],
    )
