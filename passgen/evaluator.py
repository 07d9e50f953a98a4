"""
passgen.evaluator

Password strength estimator:
- classify(password): which coarse categories (lowercase, uppercase,
  numbers, special) appear in the password
- charset_size(tags): fixed-weight pool size for those categories
- estimate_entropy(password): length * log2(charset_size), 0 for ""
- strength_label(entropy): Weak / Moderate / Strong / Very Strong
- assess_strength(password): all of the above as a StrengthReport

The estimate only looks at which categories are represented. It does not
know about exclusions or the real pool the generator sampled from.
"""

import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable

LOWERCASE = "lowercase"
UPPERCASE = "uppercase"
NUMBERS = "numbers"
SPECIAL = "special"

CHARSET_WEIGHTS: Dict[str, int] = {
    LOWERCASE: 26,
    UPPERCASE: 26,
    NUMBERS: 10,
    SPECIAL: 33,
}

# (upper bound exclusive, label); anything at or above the last bound is Very Strong
THRESHOLDS = (
    (28.0, "Weak"),
    (36.0, "Moderate"),
    (60.0, "Strong"),
)
VERY_STRONG = "Very Strong"
LABELS = tuple(label for _, label in THRESHOLDS) + (VERY_STRONG,)

# entropy that fills the GUI strength bar
FULL_BAR_BITS = 60.0


def _tag(c: str) -> str:
    if "a" <= c <= "z":
        return LOWERCASE
    if "A" <= c <= "Z":
        return UPPERCASE
    if "0" <= c <= "9":
        return NUMBERS
    return SPECIAL


def classify(password: str) -> FrozenSet[str]:
    """
    Tag every character. Only ASCII letters and digits get their own
    bucket; punctuation, whitespace and all non-ASCII text count as special.
    """
    return frozenset(_tag(c) for c in password)


def charset_size(tags: Iterable[str]) -> int:
    return sum(CHARSET_WEIGHTS[t] for t in set(tags))


def estimate_entropy(password: str) -> float:
    if not password:
        return 0.0
    return len(password) * math.log2(charset_size(classify(password)))


def strength_label(entropy: float) -> str:
    for bound, label in THRESHOLDS:
        if entropy < bound:
            return label
    return VERY_STRONG


@dataclass(frozen=True)
class StrengthReport:
    entropy: float
    label: str
    classes: FrozenSet[str] = frozenset()
    charset_size: int = 0
    length: int = 0

    @property
    def fraction(self) -> float:
        """Share of the strength bar to fill, 0.0 .. 1.0."""
        return min(max(self.entropy / FULL_BAR_BITS, 0.0), 1.0)

    def to_dict(self) -> Dict:
        return {
            "entropy": self.entropy,
            "label": self.label,
            "classes": sorted(self.classes),
            "charset_size": self.charset_size,
            "length": self.length,
            "fraction": self.fraction,
        }


def assess_strength(password: str) -> StrengthReport:
    """
    Total function: every string, including "", gets a report.
    """
    tags = classify(password)
    entropy = estimate_entropy(password)
    return StrengthReport(
        entropy=entropy,
        label=strength_label(entropy),
        classes=tags,
        charset_size=charset_size(tags),
        length=len(password),
    )
