PRE_TEST_QUESTIONS = [
    {"id": "q1", "questionText": "2 + 2 = ?", "options": ["3", "4", "5"], "correctAnswer": "4"},
    {"id": "q2", "questionText": "Capital of France?", "options": ["Paris", "Rome"], "correctAnswer": "Paris"},
    {"id": "q3", "questionText": "Water?", "options": ["H2O", "CO2"], "correctAnswer": "H2O"},
    {"id": "q4", "questionText": "6 x 7 = ?", "options": ["41", "42"], "correctAnswer": "42"},
]

POST_TEST_QUESTIONS = [
    {"id": "p1", "questionText": "3 + 3 = ?", "options": ["6", "9"], "correctAnswer": "6"},
    {"id": "p2", "questionText": "10 / 2 = ?", "options": ["2", "5"], "correctAnswer": "5"},
]

PRACTICE_QUESTIONS = [
    {"id": "f1", "questionText": "Area of a 2x3 rectangle?", "options": ["5", "6"],
     "correctAnswer": "6", "explanation": "Area is width times height."},
    {"id": "f2", "questionText": "Perimeter of a 2x3 rectangle?", "options": ["10", "12"],
     "correctAnswer": "10", "explanation": "Perimeter adds all four sides."},
]


def answers(*pairs):
    return [{"questionId": question_id, "answer": answer} for question_id, answer in pairs]
