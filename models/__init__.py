from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()

# Import models
from models.students import Student
from models.admin_users import AdminUser

from models.topics import Topic
from models.content import Content

from models.quizzes import Quiz
from models.quiz_attempts import QuizAttempt
from models.test_results import TestResult
