"""
Tests for session score aggregation.
"""
import pytest

from interview_coach.services.score_calculator import calculate_session_averages


def _row(technical, communication, confidence, logic, depth):
    return {
        "technical_score": technical,
        "communication_score": communication,
        "confidence_score": confidence,
        "logic_score": logic,
        "depth_score": depth,
    }


def test_no_rows_gives_zeros():
    averages = calculate_session_averages([])
    assert averages.response_count == 0
    assert averages.overall_score == 0
    assert averages.technical_average == 0


def test_averages_and_overall():
    averages = calculate_session_averages([
        _row(80, 70, 60, 50, 40),
        _row(60, 50, 40, 30, 20),
    ])
    assert averages.response_count == 2
    assert averages.technical_average == 70
    assert averages.communication_average == 60
    assert averages.depth_average == 30
    assert averages.overall_score == 50


def test_averages_round_to_two_decimals():
    averages = calculate_session_averages([
        _row(100, 0, 0, 0, 0),
        _row(0, 0, 0, 0, 0),
        _row(0, 0, 0, 0, 0),
    ])
    assert averages.technical_average == 33.33
    assert averages.overall_score == pytest.approx(6.67)


def test_overall_within_bounds():
    averages = calculate_session_averages([_row(100, 100, 100, 100, 100)])
    assert averages.overall_score == 100


def test_recomputation_is_idempotent():
    rows = [_row(72, 64.5, 70, 68, 55), _row(0, 0, 0, 0, 0)]
    assert calculate_session_averages(rows) == calculate_session_averages(rows)
