import os

# --- Game Shape ---
WORD_LENGTH = 5
MAX_ROWS = 6

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

KEYBOARD_LAYOUT = [
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm"
]

# --- Evaluator ---
# False: a length mismatch raises InvalidLength.
# True: the evaluator answers all-absent instead.
FAIL_CLOSED = False

# --- Word Source ---
BASE_PATH = os.path.dirname(os.path.abspath(__file__))
ANSWERS_PATH = os.path.join(BASE_PATH, "answers", "answers.txt")
DEFAULT_SECRET = "taffy"

# --- Logging ---
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
