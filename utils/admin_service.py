from classes.repository import Repository
from classes.scoring import calculate_percentage, round_half_up, score_difference, improvement_percentage
from models.students import Student
from models.test_results import TestResult
from utils.helpers import format_datetime


def average_percentage(results):
    """Rounded mean of the per-result percentages, 0 when there are none."""
    if not results:
        return 0
    return round_half_up(sum(r.score / r.max_score * 100 if r.max_score else 0 for r in results) / len(results))


def get_dashboard_stats():
    pre_results = Repository.find_all(TestResult, test_type="pre")
    post_results = Repository.find_all(TestResult, test_type="post")

    average_pre_score = average_percentage(pre_results)
    average_post_score = average_percentage(post_results)

    return {
        "totalStudents": Repository.count_where(Student),
        "preTestCompleted": len(pre_results),
        "postTestCompleted": len(post_results),
        "averagePreScore": average_pre_score,
        "averagePostScore": average_post_score,
        "improvement": score_difference(average_pre_score, average_post_score),
    }


def get_all_student_results():
    """One row per student, ordered by student code, with pre/post percentages."""
    students = Repository.find_all(Student, order_by="student_code")
    results_by_student = {}
    for result in Repository.find_all(TestResult):
        results_by_student.setdefault(result.student_id, {})[result.test_type] = result

    rows = []
    for student in students:
        tests = results_by_student.get(student.id, {})
        pre_test, post_test = tests.get("pre"), tests.get("post")

        pre_score = calculate_percentage(pre_test.score, pre_test.max_score) if pre_test else None
        post_score = calculate_percentage(post_test.score, post_test.max_score) if post_test else None
        both = pre_score is not None and post_score is not None

        rows.append({
            "studentCode": student.student_code,
            "preTestScore": pre_score,
            "postTestScore": post_score,
            "scoreDifference": score_difference(pre_score, post_score) if both else None,
            "improvementPercentage": improvement_percentage(pre_score, post_score) if both else None,
            "preTestDate": format_datetime(pre_test.completed_at) if pre_test else None,
            "postTestDate": format_datetime(post_test.completed_at) if post_test else None,
        })
    return rows


def get_export_data():
    students = Repository.find_all(Student, order_by="student_code")
    codes = {s.id: s.student_code for s in students}

    test_results = [
        {
            "studentCode": codes.get(r.student_id, "Unknown"),
            "testType": r.test_type,
            "score": r.score,
            "maxScore": r.max_score,
            "percentage": calculate_percentage(r.score, r.max_score),
            "completedAt": format_datetime(r.completed_at),
        }
        for r in Repository.find_all(TestResult, order_by="completed_at")
    ]

    return {
        "students": [
            {"studentCode": s.student_code, "createdAt": format_datetime(s.created_at)}
            for s in students
        ],
        "testResults": test_results,
    }
