"""
passgen.suggestions

Turn evaluator output into concrete, prioritized suggestions and produce
example replacement passwords (from the synthesizer) to demonstrate stronger choices.
"""

import math
from typing import Dict, List, Optional

from .entropy import EntropySource
from .evaluator import score_password, SPECIAL_POOL
from .generator import generate
from .policy import MAX_LENGTH

TARGET_BITS = 60


def _bits_per_char(pw: str) -> float:
    """Same pool logic as evaluator.estimate_entropy."""
    pool = 0
    if any(c.islower() for c in pw): pool += 26
    if any(c.isupper() for c in pw): pool += 26
    if any(c.isdigit() for c in pw): pool += 10
    if any(not c.isalnum() for c in pw): pool += SPECIAL_POOL
    return math.log2(max(pool, 2))


def suggest_improvements(
    password: str,
    target_bits: int = TARGET_BITS,
    examples: int = 1,
    source: Optional[EntropySource] = None,
) -> Dict:
    """
    {
        "score": int,
        "label": str,
        "final_bits": float,
        "suggestions": [str],     # prioritized, de-duplicated
        "examples": [str],        # generated stronger passwords
        "chars_needed": Optional[int]
    }
    """
    result = score_password(password)
    explanations = " ".join(result["explanations"]).lower()
    suggestions: List[str] = []

    if "common word" in explanations:
        suggestions.append("Avoid common words (e.g. 'password'); combine unrelated words or use random characters.")
    if "repeated" in explanations:
        suggestions.append("Break repeated characters like 'aaa'.")
    if "sequential" in explanations or "keyboard" in explanations:
        suggestions.append("Avoid sequences and keyboard walks like 'abcd', '1234' or 'qwerty'.")
    if not any(c.isupper() for c in password) or not any(c.isdigit() for c in password):
        suggestions.append("Mix upper case letters, digits and symbols.")

    chars_needed = None
    final_bits = result["final_bits"]
    if final_bits < target_bits:
        chars_needed = math.ceil((target_bits - final_bits) / _bits_per_char(password))
        suggestions.append(
            f"Add about {chars_needed} random characters to raise entropy toward {target_bits} bits."
        )
    else:
        suggestions.append("Your password meets the recommended entropy target.")

    length = min(max(16, len(password) + 4), MAX_LENGTH)
    samples = [generate(length=length, source=source) for _ in range(examples)]

    return {
        "password": password,
        "score": result["score"],
        "label": result["label"],
        "final_bits": final_bits,
        "suggestions": list(dict.fromkeys(suggestions)),
        "examples": samples,
        "chars_needed": chars_needed,
    }
