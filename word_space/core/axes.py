"""
Axis definitions: the six user-chosen words and their embeddings.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

import numpy as np

from word_space.errors import AxisValidationError, DataIntegrityError

logger = logging.getLogger(__name__)


class AxisRole(str, Enum):
    """One end of one spatial axis."""
    X_NEG = "x-"
    X_POS = "x+"
    Y_POS = "y+"
    Y_NEG = "y-"
    Z_POS = "z+"
    Z_NEG = "z-"

    @property
    def axis(self) -> int:
        """Coordinate index (0, 1, 2) this role lies on."""
        return "xyz".index(self.value[0])

    @property
    def is_positive(self) -> bool:
        return self.value.endswith("+")


# Front-end order: left, right, up, down, forward, backward (keys 1-6)
ROLE_ORDER = (
    AxisRole.X_NEG,
    AxisRole.X_POS,
    AxisRole.Y_POS,
    AxisRole.Y_NEG,
    AxisRole.Z_POS,
    AxisRole.Z_NEG,
)

# Aliases accepted by AxisWords.from_mapping
_ROLE_ALIASES = {
    "left": AxisRole.X_NEG,
    "right": AxisRole.X_POS,
    "up": AxisRole.Y_POS,
    "down": AxisRole.Y_NEG,
    "forward": AxisRole.Z_POS,
    "backward": AxisRole.Z_NEG,
    "x_neg": AxisRole.X_NEG,
    "x_pos": AxisRole.X_POS,
    "y_pos": AxisRole.Y_POS,
    "y_neg": AxisRole.Y_NEG,
    "z_pos": AxisRole.Z_POS,
    "z_neg": AxisRole.Z_NEG,
}


def _parse_role(key) -> AxisRole:
    if isinstance(key, AxisRole):
        return key
    try:
        return AxisRole(key)
    except ValueError:
        pass
    role = _ROLE_ALIASES.get(str(key).lower())
    if role is None:
        raise AxisValidationError(f"Unknown axis role: {key!r}")
    return role


@dataclass(frozen=True)
class AxisWords:
    """The six literal axis words, cleaned (stripped, lower-cased)."""
    x_pos: str
    x_neg: str
    y_pos: str
    y_neg: str
    z_pos: str
    z_neg: str

    def __post_init__(self):
        for role in ROLE_ORDER:
            value = getattr(self, _field(role))
            if not isinstance(value, str) or not value.strip():
                raise AxisValidationError("Please fill in all 6 words.")

    @classmethod
    def from_mapping(cls, words: Mapping) -> "AxisWords":
        """
        Build from a role -> word mapping.

        Keys may be AxisRole members, role strings ("x+"), field names
        ("x_pos") or direction names ("left", "right", ...).

        Raises:
            AxisValidationError: If a role is missing, unknown, or empty
        """
        cleaned: dict[str, str] = {}
        for key, word in words.items():
            role = _parse_role(key)
            cleaned[_field(role)] = (word or "").strip().lower()

        missing = [role.value for role in ROLE_ORDER if _field(role) not in cleaned]
        if missing:
            raise AxisValidationError(f"Missing axis words for: {', '.join(missing)}")

        axis_words = cls(**cleaned)
        duplicates = axis_words.duplicates()
        if duplicates:
            logger.warning(f"Axis words used more than once: {sorted(duplicates)}")
        return axis_words

    def for_role(self, role: AxisRole) -> str:
        return getattr(self, _field(_parse_role(role)))

    def as_list(self) -> list[str]:
        """Words in front-end role order."""
        return [self.for_role(role) for role in ROLE_ORDER]

    def as_set(self) -> frozenset[str]:
        """Distinct literal words, for exclusion filtering."""
        return frozenset(self.as_list())

    def duplicates(self) -> set[str]:
        counts = Counter(self.as_list())
        return {word for word, n in counts.items() if n > 1}


@dataclass(frozen=True)
class AxisSet:
    """
    The six axis embeddings for one session.

    Vectors are validated at construction: same dimensionality, finite,
    non-zero magnitude (cosine similarity is undefined otherwise).
    """
    x_pos: np.ndarray
    x_neg: np.ndarray
    y_pos: np.ndarray
    y_neg: np.ndarray
    z_pos: np.ndarray
    z_neg: np.ndarray

    def __post_init__(self):
        dims = None
        for role in ROLE_ORDER:
            name = _field(role)
            vec = np.array(getattr(self, name), dtype=np.float32).reshape(-1)
            if dims is None:
                dims = vec.shape[0]
            elif vec.shape[0] != dims:
                raise DataIntegrityError(
                    f"Axis vector {role.value} has {vec.shape[0]} dims, expected {dims}"
                )
            if not np.all(np.isfinite(vec)):
                raise DataIntegrityError(f"Axis vector {role.value} contains non-finite values")
            if not np.any(vec):
                raise DataIntegrityError(
                    f"Axis vector {role.value} has zero magnitude; "
                    "cosine similarity is undefined"
                )
            vec.flags.writeable = False
            object.__setattr__(self, name, vec)

    @classmethod
    def from_vectors(cls, axis_words: AxisWords, vectors: Sequence[np.ndarray]) -> "AxisSet":
        """
        Build from vectors listed in the same order as axis_words.as_list().
        """
        if len(vectors) != len(ROLE_ORDER):
            raise DataIntegrityError(
                f"Expected {len(ROLE_ORDER)} axis vectors, got {len(vectors)}"
            )
        return cls(**{_field(role): vec for role, vec in zip(ROLE_ORDER, vectors)})

    @property
    def dims(self) -> int:
        return self.x_pos.shape[0]

    def for_role(self, role: AxisRole) -> np.ndarray:
        return getattr(self, _field(_parse_role(role)))

    def as_matrix(self) -> np.ndarray:
        """
        Stack as a (D, 6) matrix, columns ordered x+, x-, y+, y-, z+, z-.
        """
        return np.stack(
            [self.x_pos, self.x_neg, self.y_pos, self.y_neg, self.z_pos, self.z_neg],
            axis=1,
        )

    def check_dims(self, dims: int) -> None:
        """
        Raises:
            DataIntegrityError: If the axis vectors don't match the vocabulary
        """
        if self.dims != dims:
            raise DataIntegrityError(
                f"Axis vectors have {self.dims} dims but the vocabulary has {dims}; "
                "embed the axis words with the model that built the vocabulary"
            )


def _field(role: AxisRole) -> str:
    return f"{role.value[0]}_{'pos' if role.is_positive else 'neg'}"
