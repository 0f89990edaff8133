import enum
from classes.repository import Repository
from models.test_results import TestResult


class ProgressState(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    PRE_TEST_DONE = "PRE_TEST_DONE"
    COMPLETE = "COMPLETE"


def derive_progress_state(has_pre_test_result, has_post_test_result):
    """Project the two result-existence flags onto a progression state."""
    if not has_pre_test_result:
        return ProgressState.NOT_STARTED
    if not has_post_test_result:
        return ProgressState.PRE_TEST_DONE
    return ProgressState.COMPLETE


class ProgressManager:
    @staticmethod
    def get_student_progress(student_id):
        """Recompute a student's progress from their stored test results."""
        pre_test = Repository.find_one(TestResult, student_id=student_id, test_type="pre")
        post_test = Repository.find_one(TestResult, student_id=student_id, test_type="post")

        state = derive_progress_state(pre_test is not None, post_test is not None)

        progress = {
            "studentId": student_id,
            "state": state.value,
            "preTestCompleted": pre_test is not None,
            "postTestCompleted": post_test is not None,
        }
        if pre_test is not None:
            progress["preTestScore"] = pre_test.score
        if post_test is not None:
            progress["postTestScore"] = post_test.score
        return progress
