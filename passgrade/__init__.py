"""PassGrade -- offline password strength grading.

Scores a password from 0 to 100, attaches a label and a list of tips, and
estimates its entropy.  Everything here is a pure function of the input:
no network, no disk, no logging, and the password is never kept.
"""

import math
from collections import Counter
from dataclasses import dataclass


# ── Constant tables ────────────────────────────────────────────────────────

COMMON_BASES = frozenset({
    "password", "qwerty", "abc123", "letmein", "welcome", "dragon",
    "iloveyou", "admin", "login", "football", "monkey", "starwars",
    "princess", "passw0rd",
})

KEYBOARD_RUNS = ("qwerty", "asdf", "zxcv", "12345", "09876")

_SEQUENCES = (
    "abcdefghijklmnopqrstuvwxyz",
    "0123456789",
)

# Every 3-character window of the reference sequences, e.g. "abc", "789".
_SEQUENCE_CHUNKS = frozenset(
    seq[i : i + 3] for seq in _SEQUENCES for i in range(len(seq) - 2)
)

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")

MAX_RANDOMNESS_POINTS = 60.0
MIN_GOOD_LENGTH = 12
WEAK_PATTERN_CAP = 20
DATE_DIGIT_COUNTS = frozenset({4, 6, 8})

# (lowest score, label, colour) -- ordered, contiguous, covering 0-100.
BANDS = (
    (0, "Very Weak", "#E53935"),   # red
    (20, "Weak", "#FDD835"),       # yellow
    (40, "Fair", "#FFB300"),       # amber
    (60, "Strong", "#43A047"),     # green
    (80, "Excellent", "#1E88E5"),  # blue
)

LABELS = tuple(label for _, label, _ in BANDS)

DISPLAY_TIPS = 5

TIP_EMPTY = "Enter a password"
TIP_COMMON = "Avoid common words or keyboard patterns like 'password' or 'qwerty'."
TIP_LENGTH = "Use at least 12 characters."
TIP_UPPER = "Add some UPPERCASE letters."
TIP_LOWER = "Add some lowercase letters."
TIP_DIGIT = "Add a few numbers."
TIP_SYMBOL = "Add symbols like !, ?, or #."
TIP_REPEAT = "Avoid repeating the same character many times."
TIP_SEQUENCE = "Avoid simple sequences like abc or 123."
TIP_DATE = "Don't use dates like birthdays."


# ── Result record ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of grading one password.

    *feedback* holds distinct tips, most important first; *entropy_bits* is
    uncapped while *score* is always within 0-100.
    """

    score: int  # 0-100
    label: str
    feedback: tuple[str, ...]
    entropy_bits: float

    def top_tips(self, limit: int = DISPLAY_TIPS) -> tuple[str, ...]:
        """Return at most *limit* tips, most important first."""
        return self.feedback[: max(limit, 0)]

    def to_dict(self) -> dict:
        """Plain-dict view with entropy rounded for display."""
        return {
            "score": self.score,
            "label": self.label,
            "feedback": list(self.feedback),
            "entropy_bits": round(self.entropy_bits, 1),
        }


# ── Score bands ────────────────────────────────────────────────────────────


def _band(score: int) -> tuple[int, str, str]:
    score = min(max(score, 0), 100)
    for band in reversed(BANDS):
        if score >= band[0]:
            return band
    return BANDS[0]


def label_for_score(score: int) -> str:
    """Map a 0-100 score to its label; out-of-range scores are clamped."""
    return _band(score)[1]


def band_color(score: int) -> str:
    """Hex colour of the strength bar for *score*."""
    return _band(score)[2]


# ── Pattern detectors ──────────────────────────────────────────────────────


def has_long_repeat(password: str) -> bool:
    """True if any single character occurs 3 or more times anywhere.

    Occurrences are counted across the whole string, not as adjacent runs,
    so ``"abcabcabc"`` counts as repeating.
    """
    return any(n >= 3 for n in Counter(password).values())


def has_simple_sequence(password: str) -> bool:
    """True if the password contains an ascending run like ``abc`` or ``234``."""
    lower = password.lower()
    return any(lower[i : i + 3] in _SEQUENCE_CHUNKS for i in range(len(lower) - 2))


def looks_like_date(password: str) -> bool:
    """True if the password holds exactly 4, 6 or 8 digits (a year, MMDDYY...).

    Only the digit count is checked, never whether it is a valid date.
    """
    return sum(1 for c in password if c in _DIGITS) in DATE_DIGIT_COUNTS


def contains_weak_pattern(password: str) -> bool:
    """True if a common weak word or keyboard run appears anywhere in it."""
    lower = password.lower()
    return any(base in lower for base in COMMON_BASES) or any(
        run in lower for run in KEYBOARD_RUNS
    )


# ── Strength analysis ──────────────────────────────────────────────────────


def evaluate(password: str) -> EvaluationResult:
    """Grade *password* and return an :class:`EvaluationResult`.

    The score starts from the estimated entropy (capped at 60 points), gains
    bonus points for mixing character classes and length, and loses points
    for repeats, sequences and date-like digit groups.  Passwords built on
    common words or keyboard runs are capped at 20 whatever else they do.

    Characters outside ASCII letters and digits count as symbols.
    """
    if not password:
        return EvaluationResult(
            score=0,
            label=LABELS[0],
            feedback=(TIP_EMPTY,),
            entropy_bits=0.0,
        )

    length = len(password)
    has_lower = has_upper = has_digit = has_symbol = False
    for c in password:
        if c in _LOWER:
            has_lower = True
        elif c in _UPPER:
            has_upper = True
        elif c in _DIGITS:
            has_digit = True
        else:
            has_symbol = True

    # Upper bound on the alphabet, not the characters actually used
    pool = sum([
        26 if has_lower else 0,
        26 if has_upper else 0,
        10 if has_digit else 0,
        33 if has_symbol else 0,
    ])

    entropy = length * math.log2(pool) if pool > 0 else 0.0
    randomness = min(max(entropy, 0.0), MAX_RANDOMNESS_POINTS)

    repeated = has_long_repeat(password)
    sequential = has_simple_sequence(password)
    date_like = looks_like_date(password)

    bonus = 0.0
    if has_lower and has_upper:
        bonus += 5
    if has_digit:
        bonus += 5
    if has_symbol:
        bonus += 7
    if length >= MIN_GOOD_LENGTH:
        bonus += 3
    if repeated:
        bonus -= 8
    if sequential:
        bonus -= 8
    if date_like:
        bonus -= 5

    score = min(max(math.floor(randomness + bonus), 0), 100)

    feedback: list[str] = []

    if contains_weak_pattern(password):
        score = min(score, WEAK_PATTERN_CAP)
        feedback.append(TIP_COMMON)
    if length < MIN_GOOD_LENGTH:
        feedback.append(TIP_LENGTH)
    if not has_upper:
        feedback.append(TIP_UPPER)
    if not has_lower:
        feedback.append(TIP_LOWER)
    if not has_digit:
        feedback.append(TIP_DIGIT)
    if not has_symbol:
        feedback.append(TIP_SYMBOL)
    if repeated:
        feedback.append(TIP_REPEAT)
    if sequential:
        feedback.append(TIP_SEQUENCE)
    if date_like:
        feedback.append(TIP_DATE)

    # Deduplicate while preserving order
    feedback = list(dict.fromkeys(feedback))

    return EvaluationResult(
        score=score,
        label=label_for_score(score),
        feedback=tuple(feedback),
        entropy_bits=entropy,
    )
