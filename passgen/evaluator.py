"""
passgen.evaluator

Strength check for an arbitrary, user-supplied password (the `check`
command). Unlike passgen.strength, nothing is known about how the password
was produced, so the pool is guessed from the character classes present:
- estimate_entropy(password): bits from observed classes
- detectors: repeated characters, sequential runs, keyboard walks, common words
- analyze_password(password): checklist of (criterion, passed)
- score_password(password): entropy, penalty, final bits, label, explanations
"""

import math
import re
from typing import Dict, List, Tuple

from .strength import strength_label

COMMON_WORDS = {
    "password", "123456", "qwerty", "letmein", "admin", "welcome", "iloveyou",
    "monkey", "dragon", "sunshine", "princess", "football", "master", "secret",
}

COMMON_SEQUENCES = ("123", "abc", "qwe", "asd", "password", "admin")

KEYBOARD_PATTERNS = {"qwerty", "asdf", "zxcv", "1qaz", "qazwsx", "hjkl"}

# assumed size of the punctuation pool when any symbol is present
SPECIAL_POOL = 32


def estimate_entropy(password: str) -> float:
    """``len * log2(pool)`` where pool sums the sizes of the classes that appear."""
    if not password:
        return 0.0
    pool = 0
    if any(c.islower() for c in password):
        pool += 26
    if any(c.isupper() for c in password):
        pool += 26
    if any(c.isdigit() for c in password):
        pool += 10
    if any(not c.isalnum() for c in password):
        pool += SPECIAL_POOL
    return len(password) * math.log2(max(pool, 2))


def detect_repeats(password: str) -> List[str]:
    """Runs of 3+ identical characters."""
    return [m.group(0) for m in re.finditer(r"(.)\1{2,}", password)]


def detect_sequential_runs(password: str, min_len: int = 3) -> List[str]:
    """Ascending or descending letter/digit runs such as 'abcd' or '4321'."""
    pw = password.lower()
    runs = []
    start = 0
    step = 0
    for i in range(1, len(pw) + 1):
        diff = None
        if i < len(pw) and pw[i].isalnum() and pw[i - 1].isalnum():
            diff = ord(pw[i]) - ord(pw[i - 1])
        if diff in (1, -1) and (step == 0 or diff == step):
            step = diff
            continue
        if i - start >= min_len and step:
            runs.append(pw[start:i])
        # a run that breaks direction can start the next one
        start = i - 1 if diff in (1, -1) else i
        step = diff if diff in (1, -1) else 0
    return runs


def detect_keyboard_patterns(password: str) -> List[str]:
    lower = password.lower()
    return sorted(p for p in KEYBOARD_PATTERNS if p in lower)


def detect_common_words(password: str, min_word_len: int = 3) -> List[str]:
    lower = password.lower()
    return sorted(w for w in COMMON_WORDS if len(w) >= min_word_len and w in lower)


def check_password_strength(password: str) -> str:
    """Label combining entropy, length and how many character classes are used."""
    entropy = estimate_entropy(password)
    length = len(password)
    variety = sum((
        any(c.isupper() for c in password),
        any(c.islower() for c in password),
        any(c.isdigit() for c in password),
        any(not c.isalnum() for c in password),
    ))
    if entropy < 20:
        return "Very Weak"
    if entropy < 30 or length < 8 or variety < 2:
        return "Weak"
    if entropy < 40 or length < 10 or variety < 3:
        return "Medium"
    if entropy < 50 or length < 12 or variety < 4:
        return "Strong"
    return "Very Strong"


def analyze_password(password: str) -> List[Tuple[str, bool]]:
    entropy = estimate_entropy(password)
    lower = password.lower()
    return [
        ("At least 8 characters", len(password) >= 8),
        ("At least 12 characters", len(password) >= 12),
        ("At least 16 characters", len(password) >= 16),
        ("Contains uppercase letters", any(c.isupper() for c in password)),
        ("Contains lowercase letters", any(c.islower() for c in password)),
        ("Contains numbers", any(c.isdigit() for c in password)),
        ("Contains special characters", any(not c.isalnum() for c in password)),
        ("Entropy >= 30 bits", entropy >= 30),
        ("Entropy >= 40 bits", entropy >= 40),
        ("No repeating characters (3+ consecutive)", not detect_repeats(password)),
        ("No common sequences", not any(seq in lower for seq in COMMON_SEQUENCES)),
    ]


def score_password(password: str) -> Dict:
    """
    Returns a dict:
    {
        "password": password,
        "length": int,
        "entropy": float,
        "penalty": float,
        "final_bits": float,
        "score": int,  # 0..100
        "label": str,
        "explanations": [str],
        "analysis": [(criterion, passed)],
    }
    """
    entropy = estimate_entropy(password)
    explanations: List[str] = []
    penalty = 0.0

    words = detect_common_words(password)
    if words:
        explanations.append(f"Contains common word(s): {', '.join(words)}")
        penalty += sum(max(8, len(w) * 4) for w in words)

    repeats = detect_repeats(password)
    if repeats:
        explanations.append(f"Repeated character(s): {', '.join(repeats)}")
        penalty += 10 * len(repeats)

    runs = detect_sequential_runs(password)
    if runs:
        explanations.append(f"Sequential run(s): {', '.join(runs)}")
        penalty += 15 * len(runs)

    kb = detect_keyboard_patterns(password)
    if kb:
        explanations.append(f"Keyboard pattern(s): {', '.join(kb)}")
        penalty += 18 * len(kb)

    if len(password) < 8:
        explanations.append("Password is very short (<8 characters).")
        penalty += 30

    final_bits = max(entropy - penalty, 0.0)
    # ~80 bits maps to 100
    score = max(0, int(min(100, round(final_bits / 80.0 * 100))))

    if not explanations:
        explanations.append("No obvious dictionary words, repeats, or sequences detected.")

    return {
        "password": password,
        "length": len(password),
        "entropy": entropy,
        "penalty": penalty,
        "final_bits": final_bits,
        "score": score,
        "label": strength_label(final_bits),
        "explanations": explanations,
        "analysis": analyze_password(password),
    }
