# blogforge/utils/keyword_prompt.py

from typing import Any, Optional

from blogforge.utils.preferences import preference_context
from blogforge.utils.prompts import Prompt

KEYWORDS_SYSTEM_PROMPT = "You are an SEO expert. Generate keywords that would help this article rank well."

KEYWORDS_PROMPT = """Generate 5 relevant SEO keywords for an article titled "{title}" about "{keyword}".

Return a numbered list, one keyword per line, with no commentary."""

ARTICLE_EXCERPT = """
------------------------------------------------------------
ARTICLE
------------------------------------------------------------
{content}"""

CONTEXT_HINT = "Consider including keywords related to: {context}"


def build_keyword_prompt(
    title: str,
    keyword: str,
    preferences: Any = None,
    content: Optional[str] = None,
) -> Prompt:
    """Prompt for deriving keywords, quoting the generated article when given."""
    user = KEYWORDS_PROMPT.format(title=title, keyword=keyword)

    context = preference_context(preferences)
    if context:
        user += "\n\n" + CONTEXT_HINT.replace("{context}", context)

    if content:
        user += "\n" + ARTICLE_EXCERPT.replace("{content}", content)

    return Prompt(system=KEYWORDS_SYSTEM_PROMPT, user=user)
