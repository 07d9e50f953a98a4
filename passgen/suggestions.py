"""
passgen.suggestions

Turn a strength report into concrete suggestions and produce an example
replacement password (using the generator) that reaches the target entropy.
"""

import math
from typing import Dict, List

from .charclass import ALL_CLASSES
from .evaluator import (
    CHARSET_WEIGHTS,
    LOWERCASE,
    NUMBERS,
    SPECIAL,
    UPPERCASE,
    assess_strength,
    charset_size,
    estimate_entropy,
)
from .generator import generate

_MISSING_HINTS = {
    LOWERCASE: "Add lowercase letters.",
    UPPERCASE: "Add uppercase letters.",
    NUMBERS: "Add digits.",
    SPECIAL: "Add special characters (e.g. !, #, %).",
}


def chars_needed(password: str, target_bits: float = 60) -> int:
    """
    Extra characters, drawn from the categories already present, needed to
    reach `target_bits`. An empty password is measured as lowercase-only.
    """
    current = estimate_entropy(password)
    if current >= target_bits:
        return 0
    size = charset_size(assess_strength(password).classes) or CHARSET_WEIGHTS[LOWERCASE]
    return math.ceil((target_bits - current) / math.log2(size))


def _example(min_length: int, target_bits: float) -> str:
    # the example uses every class, so estimate its per-char bits the same way
    full = math.log2(sum(CHARSET_WEIGHTS.values()))
    length = max(min_length, math.ceil(target_bits / full))
    return generate(length=length, classes=ALL_CLASSES, one_per_group=True)


def suggest_improvements(password: str, target_bits: float = 60) -> Dict:
    """
    Return a suggestion object:
    {
        "password": str,
        "entropy": float,
        "label": str,
        "chars_needed": int,
        "suggestions": [str],
        "examples": [str],
    }
    """
    report = assess_strength(password)
    suggestions: List[str] = []

    missing = [tag for tag in (LOWERCASE, UPPERCASE, NUMBERS, SPECIAL) if tag not in report.classes]
    needed = chars_needed(password, target_bits)
    if needed:
        for tag in missing:
            suggestions.append(_MISSING_HINTS[tag])
        suggestions.append(
            f"Add about {needed} random characters to raise entropy toward {target_bits:g} bits."
        )
    else:
        suggestions.append("Your password meets the recommended entropy target.")

    examples: List[str] = []
    if needed:
        examples.append(_example(max(12, len(password)), target_bits))

    return {
        "password": password,
        "entropy": report.entropy,
        "label": report.label,
        "chars_needed": needed,
        "suggestions": suggestions,
        "examples": examples,
    }

