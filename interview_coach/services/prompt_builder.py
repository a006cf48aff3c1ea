"""
Evaluation prompt builder.

Produces the single "evaluate this answer" prompt sent to the scoring backend.
Output depends only on the arguments.
"""
from typing import Optional

from interview_coach.core.constants import DEFAULT_COMPANY_PRESET, DEFAULT_DIFFICULTY

NORMAL_PERSONA = (
    "You are a fair, experienced technical interviewer. "
    "Evaluate the candidate objectively and balance encouragement with honest feedback. "
    "Name both strengths and areas for improvement, and keep feedback constructive."
)

STRESS_PERSONA = (
    "You are a demanding, high-pressure interviewer with very high standards. "
    "Score strictly and penalize vagueness, hesitation and filler words. "
    "Point out exactly where the candidate fell short, directly and without softening."
)

COMPANY_PERSONAS = {
    "google": (
        "You are a Google L5+ interviewer. "
        "Look for intellectual curiosity, ownership and collaboration. "
        "Expect scalability thinking, clean algorithmic reasoning and trade-off analysis. "
        "Surface-level answers score below 40 on depth."
    ),
    "amazon": (
        "You are an Amazon Bar Raiser. "
        "Evaluate against the Leadership Principles, especially Ownership, Dive Deep and Customer Obsession. "
        "Expect STAR-format answers with measurable outcomes. "
        "Score harshly when impact is not quantified."
    ),
    "meta": (
        "You are a Meta E5+ interviewer. "
        "Look for impact-driven thinking and systems reasoning. "
        "Expect clear problem decomposition and practical solutions. "
        "Unclear explanations score below 35 on communication."
    ),
    "startup": (
        "You are a startup CTO interviewing a future early hire. "
        "Value breadth, resourcefulness and practical solutions over theoretical perfection. "
        "Score favorably for pragmatism."
    ),
    "consulting": (
        "You are a McKinsey/BCG case interviewer. "
        "Look for structured, hypothesis-driven analysis and clear communication. "
        "Expect MECE frameworks and data-driven reasoning. "
        "Unstructured answers score below 30 on logic."
    ),
    "generic": (
        "You are a senior technical interviewer at a Fortune 500 company. "
        "Evaluate technical depth, communication clarity and professional maturity. "
        "Expect well-structured answers with concrete examples."
    ),
}

DIFFICULTY_DIRECTIVES = {
    "easy": (
        "This is an entry-level question. Be lenient. "
        "Accept simplified explanations as long as the core concepts are correct. "
        "Scores above 70 are appropriate for correct but basic answers."
    ),
    "medium": (
        "This is a mid-level question. Score on completeness and accuracy. "
        "Expect reasonable depth and some discussion of trade-offs. "
        "Scores of 60-80 fit solid but not exceptional answers."
    ),
    "hard": (
        "This is an advanced question. Be strict. "
        "Expect deep knowledge, edge-case awareness and trade-off discussion. "
        "Only truly exceptional answers score above 80. "
        "Penalize missing scalability or performance considerations."
    ),
}

SCORING_CRITERIA = """SCORING CRITERIA:
1. technical_score: correctness of technical content, accuracy of concepts, proper terminology.
2. communication_score: clarity, structure of the answer, ability to articulate ideas.
3. confidence_score: assertiveness and decisiveness, no excessive hedging or filler words.
4. logic_score: logical reasoning, step-by-step thinking, problem decomposition.
5. depth_score: depth of knowledge, edge cases, trade-offs and real-world implications.

ADDITIONAL REQUIREMENTS:
- "difficulty_recommendation": whether to increase, decrease or maintain the difficulty for the next question.
- "weak_topics": specific topics or concepts the candidate struggled with (empty array if none).
- "strengths": specific strengths demonstrated (empty array if none).
- "feedback": detailed, actionable feedback on the answer (2-4 sentences).
- "ideal_answer": what a strong answer would contain (2-4 sentences).
- "improvement_tip": one concrete, actionable tip."""

OUTPUT_SCHEMA_INSTRUCTION = """OUTPUT FORMAT:
Respond with ONLY a single valid JSON object.
Do not include markdown, backticks, code fences, comments, or any text before or after the JSON.

The object MUST contain EXACTLY these eleven fields with these types:
{
  "technical_score": <number 0-100>,
  "communication_score": <number 0-100>,
  "confidence_score": <number 0-100>,
  "logic_score": <number 0-100>,
  "depth_score": <number 0-100>,
  "difficulty_recommendation": <"increase" | "decrease" | "maintain">,
  "weak_topics": <array of strings>,
  "strengths": <array of strings>,
  "feedback": <non-empty string>,
  "ideal_answer": <non-empty string>,
  "improvement_tip": <non-empty string>
}

Scoring scale:
- 0-20: wrong or no answer
- 21-40: major gaps, fundamental misunderstanding
- 41-60: partial understanding, key points missing
- 61-80: good answer with minor gaps
- 81-100: excellent, comprehensive, expert-level

No extra fields. No missing fields."""


def get_persona_directive(mode: str, company_preset: Optional[str] = None) -> str:
    """Interviewer persona for the mode; company mode picks the preset, unknown presets use generic."""
    if mode == "stress":
        return STRESS_PERSONA
    if mode == "company":
        return COMPANY_PERSONAS.get(company_preset or DEFAULT_COMPANY_PRESET, COMPANY_PERSONAS[DEFAULT_COMPANY_PRESET])
    return NORMAL_PERSONA


def get_difficulty_directive(difficulty: str) -> str:
    return DIFFICULTY_DIRECTIVES.get(difficulty, DIFFICULTY_DIRECTIVES[DEFAULT_DIFFICULTY])


def build_evaluation_prompt(
    question_text: str,
    user_answer: str,
    role: str,
    difficulty: str,
    mode: str,
    category: str,
    company_preset: Optional[str] = None,
) -> str:
    """
    Build the evaluation prompt for one answer.

    Args:
        question_text: Question that was asked
        user_answer: Candidate's answer, embedded verbatim
        role: Target job role
        difficulty: easy | medium | hard (unknown values are calibrated as medium)
        mode: normal | stress | company
        category: Question category
        company_preset: Company persona for company mode

    Returns:
        Prompt text
    """
    mode_label = mode
    if mode == "company":
        preset = company_preset if company_preset in COMPANY_PERSONAS else DEFAULT_COMPANY_PRESET
        mode_label = f"{mode} ({preset})"

    sections = [
        "ROLE: AI Interview Evaluator",
        "",
        "INTERVIEWER PERSONALITY:",
        get_persona_directive(mode, company_preset),
        "",
        "DIFFICULTY CALIBRATION:",
        get_difficulty_directive(difficulty),
        "",
        "EVALUATION CONTEXT:",
        f"- Target Role: {role}",
        f"- Question Category: {category}",
        f"- Question Difficulty: {difficulty}",
        f"- Interview Mode: {mode_label}",
        "",
        "QUESTION ASKED:",
        f'"{question_text}"',
        "",
        "CANDIDATE'S ANSWER:",
        f'"{user_answer}"',
        "",
        SCORING_CRITERIA,
        "",
        OUTPUT_SCHEMA_INSTRUCTION,
    ]
    return "\n".join(sections)
