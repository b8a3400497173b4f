"""Main view UI components (navigation, visualization, nearby words, gauges)."""

import logging
import streamlit as st
from typing import TYPE_CHECKING

from word_space.visualization.scatter import WordSpacePlotBuilder
from word_space.ui.state import AppState, centroid
from word_space.ui.styles import render_error, render_info
import config

if TYPE_CHECKING:
    from word_space.core.session import WordSpaceSession

logger = logging.getLogger(__name__)

MOVE_STEP = 10.0


def render_main(session: "WordSpaceSession") -> None:
    """Render the full main view for an active session."""
    render_navigation(session)

    position = AppState.viewer_position()
    frame = session.index.update(position)
    nearby = session.index.nearest(position, k=config.NEARBY_COUNT)

    render_nearby(nearby)
    render_visualization(session, frame, nearby, position)
    render_axis_gauges(session, position)
    st.caption(f"{frame.n_visible:,} of {len(session.index):,} words in view")


def render_navigation(session: "WordSpaceSession") -> None:
    """Render movement and beacon controls."""
    st.markdown("#### Fly")

    # Beacons 1-6, same order as the axis inputs
    cols = st.columns(len(session.beacons))
    for i, (col, beacon) in enumerate(zip(cols, session.beacons), start=1):
        with col:
            if st.button(f"{i}: {beacon.word}", key=f"beacon_{i}", use_container_width=True):
                AppState.teleport_to(beacon.position)
                st.rerun()

    col1, col2 = st.columns([3, 1])
    with col1:
        picked = st.multiselect(
            "Blend beacons",
            options=list(range(len(session.beacons))),
            format_func=lambda i: f"{i + 1}: {session.beacons[i].word}",
            key="blend_beacons",
            label_visibility="collapsed",
            placeholder="Pick beacons to fly between...",
        )
    with col2:
        if st.button("Go", use_container_width=True, disabled=not picked):
            AppState.teleport_to(centroid([session.beacons[i].position for i in picked]))
            st.rerun()

    move_cols = st.columns(7)
    moves = [
        (f"← {session.axis_words.x_neg}", 0, -MOVE_STEP),
        (f"{session.axis_words.x_pos} →", 0, MOVE_STEP),
        (f"↑ {session.axis_words.y_pos}", 1, MOVE_STEP),
        (f"↓ {session.axis_words.y_neg}", 1, -MOVE_STEP),
        (f"↗ {session.axis_words.z_pos}", 2, MOVE_STEP),
        (f"↙ {session.axis_words.z_neg}", 2, -MOVE_STEP),
    ]
    for col, (label, axis, amount) in zip(move_cols, moves):
        with col:
            if st.button(label, key=f"move_{axis}_{amount}", use_container_width=True):
                AppState.move_viewer(axis, amount)
                st.rerun()
    with move_cols[-1]:
        if st.button("Reset", use_container_width=True):
            AppState.reset_viewer()
            st.rerun()


def render_nearby(nearby) -> None:
    """Render the transient nearby-words strip."""
    if not st.session_state.show_nearby:
        return
    text = "  ·  ".join(w.word for w in nearby) if nearby else "&nbsp;"
    st.markdown(f'<div class="ws-nearby">{text}</div>', unsafe_allow_html=True)


def render_visualization(session: "WordSpaceSession", frame, nearby, position) -> None:
    """Render the 3D word cloud."""
    builder = WordSpacePlotBuilder()
    fig = builder.build(
        session,
        frame=frame,
        nearby=nearby if st.session_state.show_nearby else None,
        viewer_position=position,
    )
    st.plotly_chart(fig, use_container_width=True, key="word_space_plot")


def render_axis_gauges(session: "WordSpaceSession", position) -> None:
    """Render one gauge per axis showing where the viewer sits between its words."""
    fractions = session.bounds.fraction(position)
    words = session.axis_words
    pairs = [
        (words.x_neg, words.x_pos),
        (words.y_neg, words.y_pos),
        (words.z_neg, words.z_pos),
    ]
    for (low, high), t in zip(pairs, fractions):
        col1, col2, col3 = st.columns([1, 4, 1])
        with col1:
            st.markdown(f'<span class="ws-gauge-label">{low}</span>', unsafe_allow_html=True)
        with col2:
            st.progress(t)
        with col3:
            st.markdown(f'<span class="ws-gauge-label">{high}</span>', unsafe_allow_html=True)


def render_welcome() -> None:
    """Render the screen shown before the first launch."""
    render_info(
        "Enter six words in the sidebar (three opposing pairs) and press "
        "<b>Launch</b> to build your word space."
    )


def render_last_error() -> None:
    """Render and keep the last recorded error."""
    if AppState.has_error():
        render_error(st.session_state.last_error)
