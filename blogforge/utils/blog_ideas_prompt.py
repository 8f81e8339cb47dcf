# blogforge/utils/blog_ideas_prompt.py

from typing import Any

from blogforge.utils.explicitness import TITLES, instruction_for
from blogforge.utils.preferences import explicitness_level, preference_context
from blogforge.utils.prompts import Prompt

BLOG_IDEAS_SYSTEM_PROMPT = "You are an expert content writer who creates SEO-optimized article titles."

BLOG_IDEAS_PROMPT = """Generate 5 unique, engaging and SEO-friendly article titles about "{keyword}".

------------------------------------------------------------
OUTPUT FORMAT
------------------------------------------------------------
Return exactly 5 titles as a numbered list, one title per line:
1. First title
2. Second title

No introduction, no explanations, no markdown."""

# Level 4-5: the context is mandatory in every title
CRITICAL_TITLE_REQUIREMENT = (
    'CRITICAL REQUIREMENT: Every single title MUST contain the exact text "{context}". '
    "A title without it is invalid."
)
ABSOLUTE_TITLE_REQUIREMENT = (
    "------------------------------------------------------------\n"
    "ABSOLUTE REQUIREMENT\n"
    "------------------------------------------------------------\n"
    'Each of the 5 titles must include "{context}".'
)
PROMINENT_TITLE_REQUIREMENT = (
    'Place "{context}" at the start of each title or set it off with a colon, e.g. "{context}: ...".'
)

# Level 1-3: natural inclusion
NATURAL_TITLE_PREFERENCE = "Writing preference: {instruction}"


def build_idea_prompt(keyword: str, preferences: Any = None) -> Prompt:
    """System and user prompt for the title-ideas request.

    Without valid preferences the result is exactly the unguided prompt.
    """
    system = BLOG_IDEAS_SYSTEM_PROMPT
    user = BLOG_IDEAS_PROMPT.replace("{keyword}", keyword)

    level = explicitness_level(preferences)
    if level is None:
        return Prompt(system=system, user=user)

    context = preference_context(preferences)
    instruction = instruction_for(level, context, target=TITLES)

    if level >= 4:
        system += "\n\n" + CRITICAL_TITLE_REQUIREMENT.replace("{context}", context) + " " + instruction
        user += "\n\n" + ABSOLUTE_TITLE_REQUIREMENT.replace("{context}", context)
        if level == 5:
            user += "\n" + PROMINENT_TITLE_REQUIREMENT.replace("{context}", context)
    else:
        system += "\n\n" + NATURAL_TITLE_PREFERENCE.replace("{instruction}", instruction)

    return Prompt(system=system, user=user)
