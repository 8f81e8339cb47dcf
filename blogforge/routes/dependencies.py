from fastapi import Depends, Request

from blogforge.services.article_pipeline import ArticlePipeline
from blogforge.services.article_store import ArticleStore
from blogforge.services.generation_client import OpenAIGenerator, TextGenerator


def get_article_store(request: Request) -> ArticleStore:
    return request.app.state.article_store


def get_generator(request: Request) -> TextGenerator:
    """The process-wide generator owned by the app; the OpenAI client is built on first use."""
    generator = request.app.state.generator
    if generator is None:
        generator = OpenAIGenerator()
        request.app.state.generator = generator
    return generator


def get_pipeline(generator: TextGenerator = Depends(get_generator)) -> ArticlePipeline:
    return ArticlePipeline(generator)
