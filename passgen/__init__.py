"""
PassGen: secure password generator with an entropy-based strength estimate.
"""

from .charclass import CharacterClass, GroupMode
from .errors import PassGenError, InvalidConfigurationError, EmptyPoolError
from .generator import GeneratorConfig, PasswordGenerator, build_pool, generate
from .evaluator import StrengthReport, assess_strength

__all__ = [
    "CharacterClass",
    "GroupMode",
    "PassGenError",
    "InvalidConfigurationError",
    "EmptyPoolError",
    "GeneratorConfig",
    "PasswordGenerator",
    "build_pool",
    "generate",
    "StrengthReport",
    "assess_strength",
]
