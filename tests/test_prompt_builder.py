"""
Tests for the evaluation prompt builder.
"""
from interview_coach.services.prompt_builder import (
    COMPANY_PERSONAS,
    DIFFICULTY_DIRECTIVES,
    NORMAL_PERSONA,
    STRESS_PERSONA,
    build_evaluation_prompt,
)


def _prompt(**overrides):
    params = dict(
        question_text="What is a race condition?",
        user_answer="Two threads touching shared state without ordering.",
        role="Backend Engineer",
        difficulty="medium",
        mode="normal",
        category="concurrency",
    )
    params.update(overrides)
    return build_evaluation_prompt(**params)


def test_prompt_is_deterministic():
    assert _prompt() == _prompt()


def test_prompt_contains_question_answer_and_context():
    prompt = _prompt()
    assert '"What is a race condition?"' in prompt
    assert '"Two threads touching shared state without ordering."' in prompt
    assert "- Target Role: Backend Engineer" in prompt
    assert "- Question Category: concurrency" in prompt
    assert "- Interview Mode: normal" in prompt
    assert NORMAL_PERSONA in prompt
    assert DIFFICULTY_DIRECTIVES["medium"] in prompt


def test_prompt_lists_all_eleven_fields():
    prompt = _prompt()
    for field in [
        "technical_score", "communication_score", "confidence_score", "logic_score",
        "depth_score", "difficulty_recommendation", "weak_topics", "strengths",
        "feedback", "ideal_answer", "improvement_tip",
    ]:
        assert f'"{field}"' in prompt
    assert "No extra fields. No missing fields." in prompt


def test_stress_mode_uses_stress_persona():
    assert STRESS_PERSONA in _prompt(mode="stress")


def test_company_mode_uses_preset_persona():
    prompt = _prompt(mode="company", company_preset="amazon")
    assert COMPANY_PERSONAS["amazon"] in prompt
    assert "- Interview Mode: company (amazon)" in prompt


def test_company_mode_without_known_preset_falls_back_to_generic():
    for preset in (None, "initech"):
        prompt = _prompt(mode="company", company_preset=preset)
        assert COMPANY_PERSONAS["generic"] in prompt
        assert "- Interview Mode: company (generic)" in prompt


def test_unknown_difficulty_calibrates_as_medium():
    assert DIFFICULTY_DIRECTIVES["medium"] in _prompt(difficulty="impossible")


def test_hard_difficulty_directive():
    assert DIFFICULTY_DIRECTIVES["hard"] in _prompt(difficulty="hard")
