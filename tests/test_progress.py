from classes.progress_manager import ProgressManager, ProgressState, derive_progress_state
from classes.test_manager import TestSubmissionManager
from tests_support import answers


def test_derive_progress_state():
    assert derive_progress_state(False, False) is ProgressState.NOT_STARTED
    assert derive_progress_state(True, False) is ProgressState.PRE_TEST_DONE
    assert derive_progress_state(True, True) is ProgressState.COMPLETE


def test_derive_progress_state_is_repeatable():
    for flags in [(False, False), (True, False), (True, True)]:
        assert derive_progress_state(*flags) == derive_progress_state(*flags)


def test_progress_follows_submissions(quizzes, student):
    assert ProgressManager.get_student_progress(student.id)["state"] == "NOT_STARTED"

    TestSubmissionManager.submit_test(student.id, "pre", quizzes["pre"].id, answers(("q1", "4")))
    progress = ProgressManager.get_student_progress(student.id)
    assert progress["state"] == "PRE_TEST_DONE"
    assert progress["preTestCompleted"] is True
    assert progress["postTestCompleted"] is False
    assert progress["preTestScore"] == 1
    assert "postTestScore" not in progress

    result = TestSubmissionManager.submit_test(student.id, "post", quizzes["post"].id, answers(("p1", "6")))
    assert result.success
    progress = ProgressManager.get_student_progress(student.id)
    assert progress["state"] == "COMPLETE"
    assert progress["postTestScore"] == 1
