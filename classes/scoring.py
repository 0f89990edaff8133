"""Scoring rules for quizzes and tests.

Every function here is pure: no I/O, no database access.
"""
import math
from collections import namedtuple

ScoreResult = namedtuple("ScoreResult", ["score", "max_score", "percentage"])

DEFAULT_FEEDBACK = "Great job!"


def round_half_up(value):
    """Round to the nearest integer with halves going up (62.5 -> 63, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def calculate_percentage(value, total):
    if not total:
        return 0
    return round_half_up(value / total * 100)


def is_correct_answer(submitted, correct):
    """Case-insensitive comparison after trimming surrounding whitespace."""
    if submitted is None or correct is None:
        return False
    return str(submitted).strip().lower() == str(correct).strip().lower()


def normalize_answers(answers):
    """Collapse a submission to one answer per question id.

    The first answer given for a question id wins, so the score does not
    depend on the order duplicates were submitted in.
    """
    normalized = {}
    for answer in answers or []:
        question_id = answer.get("questionId")
        if question_id is None or question_id in normalized:
            continue
        normalized[question_id] = answer.get("answer")
    return normalized


def calculate_score(answers, questions):
    """Score ``answers`` against the question bank ``questions``.

    ``max_score`` is the number of questions in the quiz, not the number of
    answers submitted. Answers for unknown question ids are ignored and
    unanswered questions count as incorrect.
    """
    questions = questions or []
    submitted = normalize_answers(answers)
    score = sum(
        1 for question in questions
        if question.get("id") in submitted
        and is_correct_answer(submitted[question.get("id")], question.get("correctAnswer"))
    )
    max_score = len(questions)
    return ScoreResult(score, max_score, calculate_percentage(score, max_score))


def build_feedback(answers, questions):
    """Join the explanations of every incorrectly answered question."""
    submitted = normalize_answers(answers)
    explanations = []
    for question in questions or []:
        question_id = question.get("id")
        if question_id in submitted and is_correct_answer(submitted[question_id], question.get("correctAnswer")):
            continue
        if question.get("explanation"):
            explanations.append(question["explanation"])
    return " ".join(explanations) or DEFAULT_FEEDBACK


def score_difference(pre_score, post_score):
    return post_score - pre_score


def improvement_percentage(pre_score, post_score):
    """Relative change from pre to post in percent; None when pre is 0."""
    if not pre_score:
        return None
    return round_half_up((post_score - pre_score) / pre_score * 100)
