from fastapi import APIRouter, Depends

from blogforge.routes.dependencies import get_article_store
from blogforge.schemas.users import BlogProfile, BlogProfileUpdate
from blogforge.services.article_store import ArticleStore
from blogforge.utils.auth import current_user_id, verify_token

router = APIRouter(prefix="/api/users", tags=["users"])


def _default_profile(decoded: dict) -> dict:
    name = decoded.get("name") or (decoded.get("email") or "").split("@")[0] or "Anonymous"
    return {
        "displayName": name,
        "blogTitle": f"{name}'s Blog",
        "blogDescription": "",
    }


@router.get("/me", response_model=BlogProfile)
def get_me(token_data: dict = Depends(verify_token), store: ArticleStore = Depends(get_article_store)):
    """Blog profile of the caller, created with defaults on first access."""
    uid = current_user_id(token_data)
    profile = store.get_user(uid)
    if profile is None:
        profile = store.upsert_user(uid, _default_profile(token_data))
    return profile


@router.put("/me", response_model=BlogProfile)
def update_me(
    body: BlogProfileUpdate,
    token_data: dict = Depends(verify_token),
    store: ArticleStore = Depends(get_article_store),
):
    uid = current_user_id(token_data)
    return store.upsert_user(uid, body.model_dump(by_alias=True, exclude_none=True))
