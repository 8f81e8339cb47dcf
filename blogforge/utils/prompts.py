# blogforge/utils/prompts.py

from typing import NamedTuple


class Prompt(NamedTuple):
    system: str
    user: str


RETRY_WARNING = (
    "WARNING: The previous attempt failed because it ignored a mandatory requirement. "
    "{requirement} This requirement is mandatory and output that ignores it will be rejected."
)


def with_retry_warning(prompt: Prompt, requirement: str) -> Prompt:
    """Append the retry warning to both halves of a prompt."""
    warning = RETRY_WARNING.replace("{requirement}", requirement)
    return Prompt(
        system=f"{prompt.system}\n\n{warning}",
        user=f"{prompt.user}\n\n{warning}",
    )
