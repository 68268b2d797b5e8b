"""
Tests for directive construction and lookup tables.
"""
import pytest

from albert.services.podcast.models import Audience, EventLabel, PodcastRequest
from albert.services.podcast.prompts import (
    AUDIENCE_GUIDANCE,
    FUTURE_ONLY_INSTRUCTION,
    GENERAL_INSTRUCTION,
    LABEL_SYSTEM_HINTS,
    LABEL_USER_DIRECTIVES,
    PAST_ONLY_INSTRUCTION,
    QUESTION_COUNT,
    build_image_prompt_request,
    build_question_directives,
    build_script_prompt,
    describe_audience,
    image_prompt_placeholder,
)


@pytest.fixture
def request_fr():
    return PodcastRequest(topic="Jeux Olympiques 2024", country="France", audience="Elderly")


class TestQuestionDirectives:
    """Tests for the label-driven question directives."""

    def test_every_label_has_both_fragments(self):
        for label in EventLabel:
            assert label in LABEL_SYSTEM_HINTS
            assert label in LABEL_USER_DIRECTIVES

    @pytest.mark.parametrize("label,expected,excluded", [
        (EventLabel.PAST, PAST_ONLY_INSTRUCTION, FUTURE_ONLY_INSTRUCTION),
        (EventLabel.FUTURE, FUTURE_ONLY_INSTRUCTION, PAST_ONLY_INSTRUCTION),
        (EventLabel.NONE, GENERAL_INSTRUCTION, PAST_ONLY_INSTRUCTION),
    ])
    def test_user_directive_branches_on_label(self, request_fr, label, expected, excluded):
        system_prompt, user_prompt = build_question_directives(request_fr, label)

        assert expected in user_prompt
        assert excluded not in user_prompt
        assert system_prompt.endswith(LABEL_SYSTEM_HINTS[label])

    def test_past_directive_forbids_future_questions(self, request_fr):
        _, user_prompt = build_question_directives(request_fr, EventLabel.PAST)
        assert "N'incluez aucune question sur les attentes futures" in user_prompt

    def test_directives_carry_request_fields(self, request_fr):
        system_prompt, user_prompt = build_question_directives(request_fr, EventLabel.NONE)

        assert '"Jeux Olympiques 2024"' in user_prompt
        assert "Elderly" in system_prompt
        assert "France" in user_prompt
        assert f"Générez {QUESTION_COUNT} questions" in user_prompt
        assert "liste numérotée" in user_prompt


class TestScriptPrompt:
    """Tests for the audience-tailored script directive."""

    def test_known_audience_is_described(self):
        assert describe_audience("Primary school children") == "âgés de 6 à 11 ans"
        assert describe_audience(Audience.ELDERLY) == "seniors de plus de 65 ans"

    def test_unknown_audience_passes_through(self):
        assert describe_audience("Astronauts") == "Astronauts"

    def test_answers_joined_in_order(self):
        prompt = build_script_prompt(["Premier.", "Deuxième.", "Troisième."], "Elderly", "Canada")

        assert "Informations à utiliser : Premier. Deuxième. Troisième." in prompt
        assert "vivant en Canada" in prompt

    def test_all_audience_modes_listed(self):
        prompt = build_script_prompt(["x"], "Tech Savvy people", "France")

        assert len(AUDIENCE_GUIDANCE) == 5
        for guidance in AUDIENCE_GUIDANCE.values():
            assert guidance in prompt
        assert "environ 5 minutes" in prompt


class TestImagePrompts:

    def test_request_is_parameterized_by_ordinal_only(self):
        first = build_image_prompt_request("Résumé", 1)
        second = build_image_prompt_request("Résumé", 2)

        assert "prompt number 1 of 2" in first
        assert "prompt number 2 of 2" in second
        assert first.replace("1 of 2", "N") == second.replace("2 of 2", "N")

    def test_placeholder(self):
        assert image_prompt_placeholder(2) == "Error generating image prompt 2"
