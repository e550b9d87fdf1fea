"""Built-in quiz used when no QUIZ_FILE is configured."""

# Correct answers:
# Q1: 1963 (index 0)
# Q2: True (index 0)
# Q3: Libra, Neptune (index 0, 2)
UCF_QUIZ = [
    {
        "prompt": "In what year was UCF founded?",
        "type": "multiple-choice",
        "choices": ["1963", "1738", "1954", "1973"],
        "correct": 0,
    },
    {
        "prompt": "UCF stands for the University of Central Florida.",
        "type": "true-false",
        "choices": ["True", "False"],
        "correct": 0,
    },
    {
        "prompt": "Which of these are UCF Housing communities?",
        "type": "multiple-answer",
        "choices": ["Libra", "Mercury", "Neptune", "Orion"],
        "correct": [0, 2],
    },
]
