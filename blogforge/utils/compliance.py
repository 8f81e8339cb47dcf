# blogforge/utils/compliance.py
"""
Mandatory-mention checks for explicitness levels 4 and 5.

Lower levels (and absent preferences) only ask for natural inclusion, so
any output is compliant for them.
"""

import re
from typing import Any, List, Union

from blogforge.utils.explicitness import CONTENT, TITLES
from blogforge.utils.preferences import explicitness_level, preference_context

ENFORCED_LEVEL = 4
PROMINENT_LEVEL = 5
MIN_CONTENT_MENTIONS = 5

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_BREAK = re.compile(r"[.!?]\s+\S")
MAX_TITLE_WORDS = 15


def _prominent(title: str, context: str) -> bool:
    # Opening the title in any form ("Acme's", "Acme-Approved"), or set off
    # by whitespace/colon on both sides anywhere else
    title = title.strip()
    if title.lower().startswith(context.lower()):
        return True
    pattern = r"[\s:]" + re.escape(context) + r"(?=$|[\s:,.!?])"
    return re.search(pattern, title, re.IGNORECASE) is not None


def titles_compliant(titles: List[str], context: str, level: int) -> bool:
    needle = context.lower()
    for title in titles:
        if needle not in title.lower():
            return False
        if level >= PROMINENT_LEVEL and not _prominent(title, context):
            return False
    return True


def _looks_like_title(block: str) -> bool:
    # One short line holding at most one sentence, whatever it ends with
    if "\n" in block or _SENTENCE_BREAK.search(block):
        return False
    return len(block.split()) <= MAX_TITLE_WORDS


def first_paragraph(content: str) -> str:
    """Text of the first paragraph after the title.

    Heading blocks are skipped, as is a leading block that reads like a
    bare title line.
    """
    blocks = [block.strip() for block in _PARAGRAPH_BREAK.split(content.strip()) if block.strip()]
    for index, block in enumerate(blocks):
        if block.startswith("#"):
            continue
        if index == 0 and len(blocks) > 1 and _looks_like_title(block):
            continue
        return block
    return ""


def content_compliant(content: str, context: str) -> bool:
    needle = context.lower()
    if content.lower().count(needle) < MIN_CONTENT_MENTIONS:
        return False
    return needle in first_paragraph(content).lower()


def is_compliant(output: Union[str, List[str]], preferences: Any, target: str = CONTENT) -> bool:
    """Whether generated titles (list) or content (str) honour the preferences."""
    level = explicitness_level(preferences)
    if level is None or level < ENFORCED_LEVEL:
        return True

    context = preference_context(preferences)
    if target == TITLES:
        return titles_compliant(list(output), context, level)
    return content_compliant(output or "", context)


def retry_instruction(preferences: Any, target: str = CONTENT) -> str:
    """The requirement spelled out again for the single retry."""
    context = preference_context(preferences)
    level = explicitness_level(preferences) or ENFORCED_LEVEL

    if target == TITLES:
        requirement = f'Every title MUST contain "{context}".'
        if level >= PROMINENT_LEVEL:
            requirement += f' "{context}" must open each title or be set off with a colon, e.g. "{context}: ...".'
        return requirement

    return (
        f'"{context}" MUST appear in the first paragraph of the introduction and at least '
        f"{MIN_CONTENT_MENTIONS} times across the article, including every section and the conclusion."
    )
