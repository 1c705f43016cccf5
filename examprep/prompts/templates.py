"""Terminal Templates - Messages shown during a study session."""

# =============================================================================
# INPUT
# =============================================================================

ENTER_EXAM_FILENAME = "Enter filename of exam: "
CONFIRM_ENTRY = "Confirm entry: "
ENTRY_EMPTY = "Entry must not be empty!"
ENTRIES_MUST_MATCH = "Entries must match!"

ANSWER_SINGLE_PROMPT = "Your answer (letter): "
ANSWER_MULTI_PROMPT = "Your answer (select all that apply, e.g. A,C): "
ANSWER_FREE_PROMPT = "Your answer (type '{hint_keyword}' for a hint): "
ANSWER_FREE_PROMPT_NO_HINTS = "Your answer: "

# =============================================================================
# DIRECTORY / FILES
# =============================================================================

DIRECTORY_CREATED = "Created the {directory} directory"
AVAILABLE_EXAMS = "Available exams in {directory}:"
NO_EXAMS_FOUND = "No exam files found in {directory}."
SAMPLE_WRITTEN = "Sample exam written to {path}"

# =============================================================================
# QUESTIONS
# =============================================================================

EXAM_HEADER = "=== {name} ({count} questions) ==="
QUESTION_HEADER = "\nQuestion {number}/{total}"
CHOICE_LINE = "  {letter}. {choice}"

HINT_LINE = "Hint: {hint} ({remaining} remaining)"
NO_MORE_HINTS = "No more hints."

# =============================================================================
# VERDICTS
# =============================================================================

VERDICT_CORRECT = "Correct!"
VERDICT_INCORRECT = "Incorrect."
EXPECTED_ONE = "Answer: {answer}"
EXPECTED_MANY = "Accepted answers: {answers}"
EXPLANATION_LINE = "Explanation: {explanation}"
REFS_HEADER = "References:"
REF_LINE = "  - {ref}"

# =============================================================================
# SUMMARY
# =============================================================================

SUMMARY_HEADER = "\n=== Results: {name} ==="
SUMMARY_SCORE = "Score: {correct}/{total} ({percentage}%) - {band}"
SUMMARY_HINTS = "Hints used: {hints_used}"
SUMMARY_MISSED_HEADER = "Review these questions:"
SUMMARY_MISSED_LINE = "  {number}. {prompt}"

# =============================================================================
# SAMPLE EXAM
# =============================================================================

SAMPLE_EXAM_FILENAME = "sample_exam.json"

SAMPLE_EXAM = {
    "name": "Sample Exam",
    "questions": [
        {
            "kind": "SingleChoice",
            "prompt": "What is the capital of France?",
            "choices": ["Berlin", "Paris", "London", "Rome"],
            "answer": ["Paris"],
            "explanation": "Paris has been the capital of France since 987.",
            "refs": ["https://en.wikipedia.org/wiki/Paris"],
        },
        {
            "kind": "MultiChoice",
            "prompt": "Which of these are US states?",
            "choices": ["Wyoming", "Alaska", "Puerto Rico", "Miami", "Hawaii"],
            "answer": ["Wyoming", "Alaska", "Hawaii"],
            "explanation": "Puerto Rico is a territory and Miami is a city.",
            "refs": [],
        },
        {
            "kind": "FreeEntry",
            "prompt": "Search test.txt for 'john', ignoring case.",
            "choices": ["Use grep", "The flag for ignoring case is -i"],
            "answer": [
                "grep -i john test.txt",
                "grep john test.txt -i",
                "grep john -i test.txt",
            ],
            "explanation": "grep -i performs a case-insensitive match.",
            "refs": ["man grep"],
        },
    ],
}
