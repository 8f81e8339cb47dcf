# blogforge/utils/preferences.py

from typing import Any, List, Mapping, Optional

MIN_EXPLICITNESS = 1
MAX_EXPLICITNESS = 5


def _field(preferences: Any, name: str, alias: Optional[str] = None) -> Any:
    # Accept the pydantic model as well as raw dicts coming from old clients
    if isinstance(preferences, Mapping):
        value = preferences.get(name)
        if value is None and alias:
            value = preferences.get(alias)
        return value
    return getattr(preferences, name, None)


def _level(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    if not MIN_EXPLICITNESS <= value <= MAX_EXPLICITNESS:
        return None
    return int(value)


def is_valid_preferences(preferences: Any) -> bool:
    """True iff preferences carry a non-empty context and an explicitness in 1..5.

    Anything else (missing object, missing fields, wrong types, out of range)
    means the preferences are treated as absent and no promotional
    instruction may reach a prompt.
    """
    if preferences is None:
        return False
    context = _field(preferences, "context")
    if not isinstance(context, str) or not context.strip():
        return False
    return _level(_field(preferences, "explicitness")) is not None


def explicitness_level(preferences: Any) -> Optional[int]:
    """Integer level of valid preferences, None otherwise."""
    if not is_valid_preferences(preferences):
        return None
    return _level(_field(preferences, "explicitness"))


def preference_context(preferences: Any) -> str:
    if not is_valid_preferences(preferences):
        return ""
    return _field(preferences, "context").strip()


def requested_features(preferences: Any) -> List[str]:
    """Comma-separated feature list the article body has to cover."""
    if not is_valid_preferences(preferences):
        return []
    raw = _field(preferences, "user_preferences", alias="userPreferences")
    if not isinstance(raw, str):
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]
