# blogforge/schemas/users.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from blogforge.schemas.articles import Article


class BlogProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uid: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    blog_title: Optional[str] = Field(default=None, alias="blogTitle")
    blog_description: Optional[str] = Field(default=None, alias="blogDescription")


class BlogProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: Optional[str] = Field(default=None, alias="displayName")
    blog_title: Optional[str] = Field(default=None, alias="blogTitle")
    blog_description: Optional[str] = Field(default=None, alias="blogDescription")


class BlogPage(BaseModel):
    user: BlogProfile
    articles: List[Article]
