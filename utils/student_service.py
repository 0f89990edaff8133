import logging
from classes.repository import Repository
from classes.results import ConflictExisting
from models.students import Student

logger = logging.getLogger(__name__)


def get_student_by_code(student_code):
    return Repository.find_one(Student, student_code=student_code)


def get_student_by_id(student_id):
    return Repository.find_one(Student, id=student_id)


def get_or_create_student(student_code):
    """Return the student with ``student_code``, creating it on first entry.

    Two concurrent entries with the same new code both succeed: the loser of
    the insert race gets the row the winner created.
    """
    student = get_student_by_code(student_code)
    if student:
        return student

    outcome = Repository.insert_one(Student, unique_on=("student_code",), student_code=student_code)
    if isinstance(outcome, ConflictExisting):
        return get_student_by_code(student_code)

    logger.info("Created student %s", student_code)
    return outcome.row
