"""
Tests for idea, content and keyword prompt construction.
"""

import pytest

from blogforge.schemas.articles import WritingPreferences
from blogforge.utils.blog_draft_prompt import BLOG_DRAFT_SYSTEM_PROMPT, build_content_prompt
from blogforge.utils.blog_ideas_prompt import BLOG_IDEAS_SYSTEM_PROMPT, build_idea_prompt
from blogforge.utils.keyword_prompt import build_keyword_prompt
from blogforge.utils.prompts import Prompt, with_retry_warning

INVALID_PREFERENCES = [
    None,
    WritingPreferences(),
    WritingPreferences(context="", explicitness=5),
    WritingPreferences(context="Acme", explicitness=0),
    WritingPreferences(context="Acme", explicitness=6),
    WritingPreferences(context="Acme", explicitness="high", userPreferences="cheap, fast"),
]


class TestUnguidedPrompts:

    @pytest.mark.parametrize("preferences", INVALID_PREFERENCES)
    def test_idea_prompt_identical_to_unguided(self, preferences):
        assert build_idea_prompt("coffee", preferences) == build_idea_prompt("coffee")

    @pytest.mark.parametrize("preferences", INVALID_PREFERENCES)
    def test_content_prompt_identical_to_unguided(self, preferences):
        assert build_content_prompt("Tips", "coffee", preferences) == build_content_prompt("Tips", "coffee")

    @pytest.mark.parametrize("preferences", INVALID_PREFERENCES)
    def test_keyword_prompt_identical_to_unguided(self, preferences):
        assert build_keyword_prompt("Tips", "coffee", preferences) == build_keyword_prompt("Tips", "coffee")


class TestIdeaPrompt:

    def test_base_instructions(self):
        prompt = build_idea_prompt("coffee")
        assert isinstance(prompt, Prompt)
        assert prompt.system == BLOG_IDEAS_SYSTEM_PROMPT
        assert '"coffee"' in prompt.user
        assert "5 unique" in prompt.user
        assert "numbered list" in prompt.user

    @pytest.mark.parametrize("level", [4, 5])
    def test_high_levels_demand_context_in_every_title(self, level):
        prompt = build_idea_prompt("coffee", WritingPreferences(context="Acme", explicitness=level))
        assert "CRITICAL REQUIREMENT" in prompt.system
        assert "ABSOLUTE REQUIREMENT" in prompt.user
        assert 'Each of the 5 titles must include "Acme"' in prompt.user

    def test_level_five_asks_for_prominent_placement(self):
        prompt = build_idea_prompt("coffee", WritingPreferences(context="Acme", explicitness=5))
        assert '"Acme: ..."' in prompt.user

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_low_levels_use_natural_inclusion(self, level):
        prompt = build_idea_prompt("coffee", WritingPreferences(context="Acme", explicitness=level))
        assert "Writing preference:" in prompt.system
        assert "CRITICAL" not in prompt.system
        assert "ABSOLUTE" not in prompt.user


class TestContentPrompt:

    def test_formatting_contract(self):
        prompt = build_content_prompt("5 Coffee Tips", "coffee")
        assert prompt.system == BLOG_DRAFT_SYSTEM_PROMPT
        assert '"5 Coffee Tips"' in prompt.user
        assert 'prefixed with "# "' in prompt.user
        assert 'prefixed with "### "' in prompt.user
        assert "Two line breaks before every section header" in prompt.user
        assert "One blank line after every section header" in prompt.user
        assert "Exactly one blank line between paragraphs" in prompt.user
        assert "KEYWORDS:" in prompt.user

    def test_level_four_requires_mentions_everywhere(self):
        prompt = build_content_prompt("Tips", "coffee", WritingPreferences(context="Acme", explicitness=4))
        assert "CRITICAL REQUIREMENT" in prompt.system
        assert "in the introduction, in every section" in prompt.system
        assert 'at least 5 times' in prompt.user

    def test_level_two_is_light(self):
        prompt = build_content_prompt("Tips", "coffee", WritingPreferences(context="Acme", explicitness=2))
        assert "Writing preference:" in prompt.system
        assert "ABSOLUTE" not in prompt.user

    def test_features_become_bullets(self):
        prefs = WritingPreferences(context="Acme", explicitness=3, userPreferences="free shipping, 24/7 support")
        prompt = build_content_prompt("Tips", "coffee", prefs)
        assert "- free shipping\n- 24/7 support" in prompt.user

    def test_placeholders_in_input_are_not_expanded(self):
        prompt = build_content_prompt("Tips", "{title}")
        assert 'about "{title}" with the title "Tips"' in prompt.user


class TestKeywordPrompt:

    def test_quotes_generated_content(self):
        prompt = build_keyword_prompt("Tips", "coffee", content="Body of the article")
        assert "Body of the article" in prompt.user
        assert '"Tips"' in prompt.user

    def test_context_hint(self):
        prompt = build_keyword_prompt("Tips", "coffee", WritingPreferences(context="Acme", explicitness=1))
        assert "Consider including keywords related to: Acme" in prompt.user


def test_retry_warning_appended_to_both_prompts():
    prompt = with_retry_warning(Prompt(system="sys", user="usr"), "Use Acme.")
    assert prompt.system.startswith("sys\n\nWARNING:")
    assert prompt.user.startswith("usr\n\nWARNING:")
    assert "Use Acme." in prompt.system
    assert "mandatory" in prompt.user
