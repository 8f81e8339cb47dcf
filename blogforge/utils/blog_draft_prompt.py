# blogforge/utils/blog_draft_prompt.py

from typing import Any

from blogforge.utils.explicitness import CONTENT, instruction_for
from blogforge.utils.preferences import explicitness_level, preference_context, requested_features
from blogforge.utils.prompts import Prompt

BLOG_DRAFT_SYSTEM_PROMPT = (
    "You are an expert content writer who creates comprehensive, engaging, "
    "well-structured articles in a professional tone."
)

# The response parser relies on the heading markers and blank-line layout
# requested here when it normalises the article for storage.
BLOG_DRAFT_PROMPT = """Write a comprehensive, well-structured blog article about "{keyword}" with the title "{title}".

------------------------------------------------------------
REQUIREMENTS
------------------------------------------------------------
1. Use clear, descriptive section headings
2. Write in a professional tone
3. Use only English characters
4. Make the article informative and engaging
5. Do NOT append a keyword list or a "KEYWORDS:" section

------------------------------------------------------------
OUTPUT FORMAT (follow exactly)
------------------------------------------------------------
- First line: the title, prefixed with "# "
- Section headers: prefixed with "### "
- Two line breaks before every section header
- One blank line after every section header
- Exactly one blank line between paragraphs
- No bold markers (**) and no other markdown"""

CRITICAL_CONTENT_REQUIREMENT = (
    'CRITICAL REQUIREMENT: "{context}" MUST be mentioned in the introduction, in every section '
    "and in the conclusion."
)
ABSOLUTE_CONTENT_REQUIREMENT = (
    "------------------------------------------------------------\n"
    "ABSOLUTE REQUIREMENT\n"
    "------------------------------------------------------------\n"
    '- Mention "{context}" in the first paragraph of the introduction\n'
    '- Mention "{context}" in every section and in the conclusion\n'
    '- Mention "{context}" at least 5 times in total'
)
NATURAL_CONTENT_PREFERENCE = "Writing preference: {instruction}"

FEATURES_HEADER = "The article must address each of these points:"


def build_content_prompt(title: str, keyword: str, preferences: Any = None) -> Prompt:
    """System and user prompt for the article-body request."""
    system = BLOG_DRAFT_SYSTEM_PROMPT
    user = BLOG_DRAFT_PROMPT.format(keyword=keyword, title=title)

    level = explicitness_level(preferences)
    if level is None:
        return Prompt(system=system, user=user)

    context = preference_context(preferences)
    instruction = instruction_for(level, context, target=CONTENT)

    if level >= 4:
        system += "\n\n" + CRITICAL_CONTENT_REQUIREMENT.replace("{context}", context) + " " + instruction
        user += "\n\n" + ABSOLUTE_CONTENT_REQUIREMENT.replace("{context}", context)
    else:
        system += "\n\n" + NATURAL_CONTENT_PREFERENCE.replace("{instruction}", instruction)

    features = requested_features(preferences)
    if features:
        user += "\n\n" + FEATURES_HEADER + "\n" + "\n".join(f"- {feature}" for feature in features)

    return Prompt(system=system, user=user)
