"""
Evaluation orchestrator.

Runs one answer through prompt -> model -> validation -> persistence, then
feeds the result into weak skill memory and the adaptive step.
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.ai_run import AiRun
from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.question import Question
from interview_coach.db.models.response import Response
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.llm.caller import call_model
from interview_coach.llm.router import ModelCallConfig
from interview_coach.schemas.evaluation import (
    EvaluationOutput,
    EvaluationRequest,
    ScoreRecord,
    SessionAverages,
    default_score_record,
)
from interview_coach.services.adaptive_service import process_adaptive_step
from interview_coach.services.evaluation_validator import ValidationOutcome, validate_evaluation_output
from interview_coach.services.prompt_builder import build_evaluation_prompt
from interview_coach.services.score_calculator import calculate_session_averages
from interview_coach.services.weak_skill_memory import process_memory_update

logger = logging.getLogger(__name__)


def _failure(error: str, **extra) -> EvaluationOutput:
    extra.setdefault("llm_output_valid", False)
    extra.setdefault("evaluation", default_score_record())
    return EvaluationOutput(success=False, error=error, **extra)


def upsert_score_breakdown(db: Session, session_id: int, averages: SessionAverages) -> ScoreBreakdown:
    """Write the recomputed aggregate onto the session's single breakdown row. Caller commits."""
    breakdown = db.query(ScoreBreakdown).filter(ScoreBreakdown.session_id == session_id).first()
    if not breakdown:
        breakdown = ScoreBreakdown(session_id=session_id)
        db.add(breakdown)

    breakdown.technical_average = averages.technical_average
    breakdown.communication_average = averages.communication_average
    breakdown.confidence_average = averages.confidence_average
    breakdown.logic_average = averages.logic_average
    breakdown.depth_average = averages.depth_average
    breakdown.overall_score = averages.overall_score
    breakdown.response_count = averages.response_count
    return breakdown


def evaluate_response(
    db: Session,
    request: EvaluationRequest,
    llm_config: Optional[ModelCallConfig] = None,
) -> EvaluationOutput:
    """
    Evaluate and store one interview answer.

    Never raises. Backend or validation problems still store a response with
    default scores (llm_output_valid=False); ownership or persistence failures
    store nothing and return success=False.

    Args:
        db: Database session
        request: Answer and its interview context
        llm_config: Scoring backend override (defaults come from configuration)

    Returns:
        EvaluationOutput with the stored scores and refreshed session averages
    """
    try:
        return _run_evaluation(db, request, llm_config or ModelCallConfig())
    except Exception as e:
        logger.error(f"Evaluation pipeline crashed for session {request.session_id}: {e}", exc_info=True)
        try:
            db.rollback()
        except SQLAlchemyError:
            logger.error("Rollback after pipeline failure also failed", exc_info=True)
        return _failure(f"Evaluation failed: {type(e).__name__}")


def _run_evaluation(db: Session, request: EvaluationRequest, llm_config: ModelCallConfig) -> EvaluationOutput:
    session = db.query(InterviewSession).filter(
        InterviewSession.id == request.session_id,
        InterviewSession.user_id == request.user_id,
    ).first()
    if not session:
        logger.warning(f"Evaluation rejected: session {request.session_id} not found for user_id={request.user_id}")
        return _failure("Session not found")

    question = None
    question_text = request.question_text
    if request.question_id is not None:
        question = db.query(Question).filter(
            Question.id == request.question_id,
            Question.session_id == session.id,
        ).first()
        if not question:
            logger.warning(f"Evaluation rejected: question {request.question_id} not in session {session.id}")
            return _failure("Question not found in session")
        question_text = question.text
    elif not question_text or not question_text.strip():
        return _failure("question_id or question_text is required")

    current_difficulty = session.difficulty

    prompt = build_evaluation_prompt(
        question_text=question_text,
        user_answer=request.user_answer,
        role=request.role,
        difficulty=request.difficulty,
        mode=request.mode,
        category=request.category,
        company_preset=request.company_preset,
    )
    call = call_model(prompt, llm_config)
    if call.success:
        outcome = validate_evaluation_output(call.content)
    else:
        outcome = ValidationOutcome(valid=False, defects=[call.error or "model call failed"])

    record: ScoreRecord = outcome.record if outcome.valid else default_score_record()
    if not outcome.valid:
        logger.warning(f"Default scores applied for session {session.id}: {outcome.defects}")

    try:
        if question is None:
            question = Question(
                session_id=session.id,
                text=question_text,
                difficulty=request.difficulty,
                category=request.category,
            )
            db.add(question)
            db.flush()

        response = Response(
            session_id=session.id,
            question_id=question.id,
            answer_text=request.user_answer,
            technical_score=record.technical_score,
            communication_score=record.communication_score,
            confidence_score=record.confidence_score,
            logic_score=record.logic_score,
            depth_score=record.depth_score,
            difficulty_recommendation=record.difficulty_recommendation,
            weak_topics=list(record.weak_topics),
            strengths=list(record.strengths),
            feedback=record.feedback,
            ideal_answer=record.ideal_answer,
            improvement_tip=record.improvement_tip,
            llm_output_valid=outcome.valid,
        )
        db.add(response)
        db.add(AiRun(
            user_id=request.user_id,
            session_id=session.id,
            provider=call.provider or llm_config.provider or "unknown",
            model=call.model or "",
            tokens_in=call.usage.get("prompt_tokens", 0),
            tokens_out=call.usage.get("completion_tokens", 0),
            status="completed" if call.success else "failed",
            llm_output_valid=outcome.valid,
            error_message=call.error or ("; ".join(outcome.defects) if outcome.defects else None),
        ))
        db.flush()

        rows = db.query(Response).filter(Response.session_id == session.id).all()
        averages = calculate_session_averages(rows)
        upsert_score_breakdown(db, session.id, averages)
        session.average_score = averages.overall_score

        db.commit()
        response_id = response.id
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to store evaluation for session {request.session_id}: {e}", exc_info=True)
        return _failure(
            "Failed to store evaluation",
            llm_output_valid=outcome.valid,
            validation_errors=outcome.defects,
            evaluation=record,
        )

    logger.info(
        f"Response {response_id} stored: session={session.id}, valid={outcome.valid}, "
        f"overall={averages.overall_score}, responses={averages.response_count}"
    )

    memory = process_memory_update(db, request.user_id, record.weak_topics)
    step = process_adaptive_step(
        db,
        session_id=session.id,
        user_id=request.user_id,
        current_difficulty=current_difficulty,
        evaluation_recommendation=record.difficulty_recommendation,
        weak_topics=record.weak_topics,
    )

    return EvaluationOutput(
        success=True,
        response_id=response_id,
        llm_output_valid=outcome.valid,
        validation_errors=outcome.defects,
        evaluation=record,
        session_averages=averages,
        next_difficulty=step.next_difficulty,
        top_weak_skills=memory.top_weak_skills,
    )
