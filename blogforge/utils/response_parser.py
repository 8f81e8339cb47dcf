# blogforge/utils/response_parser.py
"""
Turns raw model output into titles, article bodies and keyword lists.

Article bodies are cleaned in one of two modes:
  * AUTHORING keeps "#" / "###" headings so the article page can rebuild
    its sections. This is what gets stored and served.
  * PLAIN strips every markdown marker, for previews and search snippets.
"""

import re
from enum import Enum
from typing import Iterable, List

MAX_TITLES = 5
MAX_KEYWORDS = 5
KEYWORDS_MARKER = "KEYWORDS:"
BULLET = "•"

_NUMBERED = re.compile(r"^\d+\.\s*(.*)$")
_LIST_MARKER = re.compile(r"^(?:\d+[.)]|[-*•])\s*")
_BOLD = re.compile(r"\*\*(.+?)\*\*")
_HEADING_LINE = re.compile(r"^\s*(#{1,6})\s+(.*?)\s*$")
_HEADING_PREFIX = re.compile(r"^[ \t]*#{1,6}[ \t]+", re.MULTILINE)
_MD_BULLET = re.compile(r"^([ \t]*)\* ", re.MULTILINE)
_EXCESS_BREAKS = re.compile(r"\n{3,}")


class CleanMode(str, Enum):
    AUTHORING = "authoring"
    PLAIN = "plain"


def _strip_bold(text: str) -> str:
    text = _BOLD.sub(r"\1", text)
    return text.replace("**", "")


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1].strip()
    return text


def parse_titles(raw: str) -> List[str]:
    """Numbered-list lines only, marker stripped, at most five.

    Output without any "N." lines yields an empty list rather than an error.
    """
    titles = []
    for line in (raw or "").splitlines():
        match = _NUMBERED.match(line.strip())
        if not match:
            continue
        title = _strip_quotes(_strip_bold(match.group(1)).strip())
        if title:
            titles.append(title)
    return titles[:MAX_TITLES]


def _normalize_headings(text: str) -> str:
    # Leading "#" heading stays the title, every other heading becomes "###",
    # and each heading gets a blank line on both sides.
    out: List[str] = []
    for line in text.split("\n"):
        match = _HEADING_LINE.match(line)
        if not match:
            out.append(line)
            continue
        hashes, heading = match.groups()
        if not heading:
            continue
        is_title = len(hashes) == 1 and not any(existing.strip() for existing in out)
        if out and out[-1].strip():
            out.append("")
        out.append(f"{'#' if is_title else '###'} {heading}")
        out.append("")
    return "\n".join(out)


def clean_content(raw: str, mode: CleanMode = CleanMode.AUTHORING) -> str:
    """Clean a generated article body.

    Order matters: bold wrapper, bold markers, headings, bullets, the
    trailing KEYWORDS section, then whitespace.
    """
    text = (raw or "").replace("\r\n", "\n").strip()

    if text.startswith("**"):
        text = text[2:]
    if text.endswith("**"):
        text = text[:-2]
    text = _strip_bold(text)

    if mode == CleanMode.PLAIN:
        text = _HEADING_PREFIX.sub("", text)
    else:
        text = _normalize_headings(text)

    text = _MD_BULLET.sub(r"\1" + BULLET + " ", text)

    marker = text.find(KEYWORDS_MARKER)
    if marker != -1:
        text = text[:marker]

    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _EXCESS_BREAKS.sub("\n\n", text)
    return text.strip()


def clean_keywords(keywords: Iterable[str]) -> List[str]:
    """Item-wise bold stripping and trimming; empties dropped."""
    cleaned = []
    for keyword in keywords or []:
        if not isinstance(keyword, str):
            continue
        keyword = _strip_bold(keyword).strip()
        if keyword:
            cleaned.append(keyword)
    return cleaned


def parse_keywords(raw: str) -> List[str]:
    lines = [line.strip() for line in (raw or "").splitlines() if line.strip()]
    if len(lines) == 1 and "," in lines[0]:
        lines = [part.strip() for part in lines[0].split(",")]

    keywords: List[str] = []
    seen = set()
    for line in lines:
        # "Here are 5 keywords:" style lead-ins
        if line.endswith(":"):
            continue
        item = _LIST_MARKER.sub("", _strip_bold(line)).strip()
        item = _strip_quotes(item)
        if not item or item.lower() in seen:
            continue
        seen.add(item.lower())
        keywords.append(item)
    return keywords[:MAX_KEYWORDS]


def plain_excerpt(content: str, length: int = 200) -> str:
    text = " ".join(clean_content(content, CleanMode.PLAIN).split())
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."
