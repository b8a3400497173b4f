"""
Centralized session state management for Word Space.
Provides typed accessors and clear state transition methods.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import numpy as np
import streamlit as st

import config


def arrival_point(
    current: Sequence[float],
    target: Sequence[float],
    standoff: float = config.TELEPORT_STANDOFF
) -> tuple[float, float, float]:
    """
    Where to arrive when teleporting toward a target.

    The viewer stops `standoff` units short of the target, on the side it
    came from, so the target is visible ahead. If the viewer is already at
    the target it stays there.
    """
    current = np.asarray(current, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    offset = current - target
    length = np.linalg.norm(offset)
    if length == 0:
        return tuple(float(v) for v in target)
    arrival = target + offset / length * standoff
    return tuple(float(v) for v in arrival)


def centroid(points: Sequence[Sequence[float]]) -> tuple[float, float, float]:
    """Mean of several (x, y, z) points."""
    mean = np.asarray(points, dtype=np.float64).reshape(-1, 3).mean(axis=0)
    return tuple(float(v) for v in mean)


@dataclass
class StateDefaults:
    """Default values for all session state variables."""
    axis_inputs: dict = field(default_factory=lambda: dict(config.DEFAULT_AXIS_WORDS))
    session_manager: Optional[Any] = None
    viewer_position: tuple = config.VIEWER_START
    top_k: int = config.DEFAULT_TOP_K
    show_nearby: bool = True
    last_error: Optional[str] = None
    progress_log: list = field(default_factory=list)


class AppState:
    """
    Wrapper around Streamlit session state with type hints and defaults.
    Provides clear API for state transitions.
    """

    @classmethod
    def init(cls) -> None:
        """Initialize all session state with defaults."""
        defaults = StateDefaults()
        for field_name in defaults.__dataclass_fields__:
            if field_name not in st.session_state:
                st.session_state[field_name] = getattr(defaults, field_name)

    @classmethod
    def begin_launch(cls) -> None:
        """Clear the error and launch log before a new axis set is tried."""
        st.session_state.last_error = None
        st.session_state.progress_log = []

    @classmethod
    def reset_viewer(cls) -> None:
        """Put the viewer back at the start position."""
        cls.set_viewer_position(config.VIEWER_START)

    @classmethod
    def set_error(cls, message: str) -> None:
        """Record an error for display."""
        st.session_state.last_error = message

    @classmethod
    def clear_error(cls) -> None:
        """Clear any recorded error."""
        st.session_state.last_error = None

    @classmethod
    def set_viewer_position(cls, position: Sequence[float]) -> None:
        st.session_state.viewer_position = tuple(float(v) for v in position)

    @classmethod
    def move_viewer(cls, axis: int, amount: float) -> None:
        """Nudge the viewer along one axis."""
        position = list(st.session_state.viewer_position)
        position[axis] += amount
        cls.set_viewer_position(position)

    @classmethod
    def teleport_to(cls, target: Sequence[float]) -> None:
        """Jump to just short of a target point."""
        cls.set_viewer_position(arrival_point(st.session_state.viewer_position, target))

    @staticmethod
    def viewer_position() -> tuple:
        return st.session_state.get("viewer_position", config.VIEWER_START)

    @staticmethod
    def current_session():
        """The active WordSpaceSession, if any."""
        manager = st.session_state.get("session_manager")
        return manager.current if manager is not None else None

    @staticmethod
    def has_session() -> bool:
        return AppState.current_session() is not None

    @staticmethod
    def has_error() -> bool:
        """Check if there's an error to display."""
        return st.session_state.get("last_error") is not None


def init_session_state() -> None:
    """Convenience function to initialize session state."""
    AppState.init()
