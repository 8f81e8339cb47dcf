# blogforge/utils/explicitness.py
"""
Explicitness policy: how strongly a promotional context has to show up.

Two parallel instruction sets exist. Titles get the lighter touch; article
bodies get structural requirements (headers, feature coverage, call-to-action).
"""

TITLES = "titles"
CONTENT = "content"

TITLE_INSTRUCTIONS = {
    1: 'If it fits naturally, let "{context}" quietly shape the angle of a title. Do not name or promote it directly.',
    2: 'Where it reads naturally, mention "{context}" in one or two of the titles. Keep the mention light and never salesy.',
    3: 'Reference "{context}" in several of the titles so the connection is clear, while each title stays focused on the topic.',
    4: 'Make "{context}" a recurring theme: include "{context}" in every title and tie each title to its concrete features or benefits.',
    5: 'Make "{context}" the subject of every title: start the title with "{context}" or set it off clearly (for example "{context}: ..."), so it cannot be missed.',
}

CONTENT_INSTRUCTIONS = {
    1: 'Weave "{context}" in very subtly, once or twice at most, as background. No direct promotion.',
    2: 'Mention "{context}" naturally in the middle of a few paragraphs where it genuinely helps the reader. Keep it light.',
    3: 'Mention "{context}" regularly throughout the body paragraphs in a balanced way. Never put it in the section headers.',
    4: (
        '"{context}" is a recurring theme of the article. Mention it in the introduction, in every section '
        'and in the conclusion, use it in some of the section headers, and discuss its concrete features and benefits.'
    ),
    5: (
        '"{context}" is the central subject of the article. It must appear in the title, in the section headers '
        'and in every section, and the article must end with a clear call-to-action for "{context}".'
    ),
}

FALLBACK_INSTRUCTION = 'Where it is relevant, you may reference "{context}".'


def instruction_for(level: int, context: str, target: str = CONTENT) -> str:
    """Instruction text for an explicitness level, for titles or for the article body."""
    instructions = TITLE_INSTRUCTIONS if target == TITLES else CONTENT_INSTRUCTIONS
    template = instructions.get(level, FALLBACK_INSTRUCTION)
    return template.format(context=context)
