# blogforge/services/article_pipeline.py
"""
Article generation pipeline.

    keyword + preferences -> prompt -> model -> parser -> compliance check
    (at most one retry with a warning appended) -> titles / article

Every call builds its own prompts and keeps no state between requests; the
only shared object is the injected generator.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar

from blogforge.core.config import KEYWORD_PROMPT_CONTENT_CHARS
from blogforge.schemas.articles import GeneratedArticle, SeoScore
from blogforge.services.errors import (
    ArticleGenerationError,
    ComplianceError,
    EmptyResultError,
    GenerationError,
    InputError,
)
from blogforge.services.generation_client import TextGenerator
from blogforge.utils.blog_draft_prompt import build_content_prompt
from blogforge.utils.blog_ideas_prompt import build_idea_prompt
from blogforge.utils.compliance import is_compliant, retry_instruction
from blogforge.utils.explicitness import CONTENT, TITLES
from blogforge.utils.keyword_prompt import build_keyword_prompt
from blogforge.utils.prompts import Prompt, with_retry_warning
from blogforge.utils.response_parser import clean_content, parse_keywords, parse_titles

logger = logging.getLogger(__name__)

T = TypeVar("T")

# First draft plus one retry
MAX_ATTEMPTS = 2

SEO_SCORE = 85
SEO_SUGGESTIONS = [
    "Add internal links where relevant",
    "Include more industry-specific terms",
    "Consider adding media content",
]


def fixed_seo_score() -> SeoScore:
    """The score is a policy value, not computed from the content."""
    return SeoScore(score=SEO_SCORE, suggestions=list(SEO_SUGGESTIONS))


def _require(name: str, value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InputError(f"{name} is required")
    return value.strip()


class ArticlePipeline:
    def __init__(self, generator: TextGenerator, keyword_content_chars: int = KEYWORD_PROMPT_CONTENT_CHARS):
        self._generator = generator
        self._keyword_content_chars = keyword_content_chars

    def generate_article_ideas(self, keyword: str, preferences: Any = None) -> List[str]:
        """Up to five title ideas for a keyword.

        An empty list is a valid outcome (nothing parseable came back).
        Raises InputError, GenerationError or ComplianceError.
        """
        keyword = _require("keyword", keyword)
        prompt = build_idea_prompt(keyword, preferences)
        titles = self._generate_compliant(prompt, parse_titles, preferences, TITLES)
        logger.info("Generated %d title ideas for keyword=%r", len(titles), keyword)
        return titles

    def generate_article_content(self, title: str, keyword: str, preferences: Any = None) -> GeneratedArticle:
        """Article body, derived keywords and the fixed SEO score.

        Raises InputError, GenerationError, EmptyResultError or ComplianceError;
        nothing partial is ever returned.
        """
        title = _require("title", title)
        keyword = _require("keyword", keyword)

        prompt = build_content_prompt(title, keyword, preferences)
        content = self._generate_compliant(prompt, clean_content, preferences, CONTENT)
        if not content:
            logger.warning("Empty article body for title=%r", title)
            raise EmptyResultError("Generated content was empty after cleaning")

        keyword_prompt = build_keyword_prompt(
            title,
            keyword,
            preferences,
            content=content[: self._keyword_content_chars],
        )
        keywords = parse_keywords(self._call(keyword_prompt))
        if not keywords:
            logger.warning("No keywords parsed for title=%r", title)
            raise EmptyResultError("Generated keywords were empty after parsing")

        return GeneratedArticle(content=content, keywords=keywords, seo_score=fixed_seo_score())

    def _call(self, prompt: Prompt) -> str:
        try:
            return self._generator.generate(prompt.system, prompt.user)
        except ArticleGenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Text generation failed: {e}") from e

    def _generate_compliant(
        self,
        prompt: Prompt,
        parse: Callable[[str], T],
        preferences: Any,
        target: str,
    ) -> T:
        attempt_prompt = prompt
        for attempt in range(1, MAX_ATTEMPTS + 1):
            logger.debug("Generating %s, attempt %d/%d", target, attempt, MAX_ATTEMPTS)
            output = parse(self._call(attempt_prompt))
            if is_compliant(output, preferences, target):
                return output

            if attempt < MAX_ATTEMPTS:
                logger.warning("Generated %s not compliant on attempt %d, retrying", target, attempt)
                attempt_prompt = with_retry_warning(prompt, retry_instruction(preferences, target))

        logger.error("Generated %s still not compliant after %d attempts", target, MAX_ATTEMPTS)
        raise ComplianceError(f"Generated {target} missed mandatory mentions after retry")
