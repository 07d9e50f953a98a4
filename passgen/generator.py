"""
passgen.generator
Secure password generator using Python's secrets module.

Every draw goes through `secrets.choice` / `secrets.SystemRandom`; there is
no way to plug in a seeded or non-cryptographic source.
"""

from dataclasses import dataclass, field, replace
from secrets import choice, SystemRandom
import logging
from typing import FrozenSet, Iterable, List, Optional, Union

from .charclass import ALL_CLASSES, CharacterClass, GroupMode, ordered
from .errors import EmptyPoolError, InvalidConfigurationError


logger = logging.getLogger(__name__)
_sysrand = SystemRandom()

ClassSpec = Iterable[Union[CharacterClass, str]]


def _as_classes(classes: ClassSpec) -> FrozenSet[CharacterClass]:
    out = set()
    for c in classes:
        out.add(c if isinstance(c, CharacterClass) else CharacterClass.parse(c))
    return frozenset(out)


@dataclass(frozen=True)
class GeneratorConfig:
    length: int = 12
    classes: FrozenSet[CharacterClass] = field(default_factory=lambda: ALL_CLASSES)
    excluded: str = ""
    one_per_group: bool = False
    group_mode: GroupMode = GroupMode.REPLACE
    custom_alphabet: str = ""

    def __post_init__(self):
        # normalise so callers may pass lists of tags or a plain string mode
        object.__setattr__(self, "classes", _as_classes(self.classes))
        if not isinstance(self.group_mode, GroupMode):
            object.__setattr__(self, "group_mode", GroupMode(self.group_mode))


def _strip_excluded(chars: str, excluded: str) -> str:
    drop = set(excluded)
    # dict.fromkeys keeps first occurrence order
    return "".join(c for c in dict.fromkeys(chars) if c not in drop)


def build_groups(config: GeneratorConfig) -> List[str]:
    """
    Per-class alphabets after exclusion, in pool order. The custom alphabet,
    when set, is its own group. Groups that exclusion emptied are dropped.
    """
    groups = [c.alphabet for c in ordered(config.classes)]
    if config.custom_alphabet:
        groups.append(config.custom_alphabet)
    groups = [_strip_excluded(g, config.excluded) for g in groups]
    return [g for g in groups if g]


def build_pool(config: GeneratorConfig) -> str:
    """
    Concatenate the selected alphabets (lower, upper, digits, special, then
    any custom alphabet), de-duplicate and remove excluded characters.
    Raises EmptyPoolError when nothing is left.
    """
    raw = "".join(c.alphabet for c in ordered(config.classes)) + config.custom_alphabet
    pool = _strip_excluded(raw, config.excluded)
    if not pool:
        raise EmptyPoolError(config.excluded)
    return pool


def validate(config: GeneratorConfig) -> None:
    if not config.classes and not config.custom_alphabet:
        raise InvalidConfigurationError("At least one character class must be selected")
    if config.length <= 0:
        raise InvalidConfigurationError("length must be > 0")
    if config.one_per_group and config.group_mode is GroupMode.REPLACE:
        groups = len(build_groups(config))
        if config.length < groups:
            raise InvalidConfigurationError(
                f"length {config.length} too small for {groups} required character groups"
            )


class PasswordGenerator:
    """
    Holds one explicit GeneratorConfig. Nothing is shared between instances.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def configure(self, **changes) -> GeneratorConfig:
        """Store new settings without validating them."""
        self.config = replace(self.config, **changes)
        return self.config

    def is_valid(self) -> bool:
        try:
            validate(self.config)
        except InvalidConfigurationError:
            return False
        return True

    def validate(self) -> None:
        validate(self.config)

    def build_pool(self) -> str:
        return build_pool(self.config)

    def generate(self) -> str:
        cfg = self.config
        validate(cfg)
        pool = build_pool(cfg)
        logger.debug(
            "generating: length=%d pool=%d one_per_group=%s mode=%s",
            cfg.length, len(pool), cfg.one_per_group, cfg.group_mode.value,
        )

        password_chars: List[str] = []
        if cfg.one_per_group:
            for group in build_groups(cfg):
                password_chars.append(choice(group))

        if cfg.one_per_group and cfg.group_mode is GroupMode.REPLACE:
            remaining = cfg.length - len(password_chars)
        else:
            remaining = cfg.length

        for _ in range(remaining):
            password_chars.append(choice(pool))

        if cfg.one_per_group and cfg.group_mode is GroupMode.REPLACE:
            _sysrand.shuffle(password_chars)
        return "".join(password_chars)


def generate(
    length: int = 12,
    classes: ClassSpec = ALL_CLASSES,
    excluded: str = "",
    one_per_group: bool = False,
    group_mode: Union[GroupMode, str] = GroupMode.REPLACE,
    custom_alphabet: str = "",
) -> str:
    """
    Generate a cryptographically secure password.

    Raises InvalidConfigurationError when no classes (and no custom alphabet)
    are selected or length <= 0, and EmptyPoolError when `excluded` removes
    every candidate character.
    """
    cfg = GeneratorConfig(
        length=length,
        classes=classes,
        excluded=excluded,
        one_per_group=one_per_group,
        group_mode=group_mode,
        custom_alphabet=custom_alphabet,
    )
    return PasswordGenerator(cfg).generate()


def parse_length(text: str) -> int:
    """Parse a length typed by a human; used by the GUI and the API."""
    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        raise InvalidConfigurationError("Invalid length. Please enter a valid number.") from None
    if value <= 0:
        raise InvalidConfigurationError("Invalid length. Please enter a valid number.")
    return value


__all__ = [
    "GeneratorConfig",
    "PasswordGenerator",
    "build_groups",
    "build_pool",
    "generate",
    "parse_length",
    "validate",
]
