"""Sidebar UI components for Word Space."""

import logging
import streamlit as st
from typing import TYPE_CHECKING

from word_space.core.axes import ROLE_ORDER
from word_space.core.session import SessionManager
from word_space.errors import WordSpaceError
from word_space.ui.state import AppState
from word_space.ui.styles import render_warning
import config

if TYPE_CHECKING:
    from word_space.core.vector_store import VectorStore
    from word_space.embedders.base import BaseEmbedder

logger = logging.getLogger(__name__)


def render_sidebar(vs: "VectorStore", embedder: "BaseEmbedder") -> None:
    """Render the complete sidebar."""
    with st.sidebar:
        render_axis_inputs(vs, embedder)
        render_view_options()
        st.markdown("---")
        render_vocabulary_info(vs, embedder)
        st.markdown("---")
        render_session_info()


def render_axis_inputs(vs: "VectorStore", embedder: "BaseEmbedder") -> None:
    """Render the six axis-word inputs and the launch button."""
    st.markdown("### Your Axes")

    inputs = st.session_state.axis_inputs
    for role in ROLE_ORDER:
        label = config.AXIS_LABELS[role.value]
        inputs[role.value] = st.text_input(
            f"{label.title()} ({role.value})",
            value=inputs.get(role.value, ""),
            key=f"axis_{role.value}",
        )

    st.session_state.top_k = st.slider(
        "Words to place",
        min_value=500,
        max_value=20000,
        value=st.session_state.top_k,
        step=500,
        help="How many of the most axis-relevant words to keep"
    )

    if st.button("Launch", type="primary", use_container_width=True):
        _launch(vs, embedder, dict(inputs))


def render_view_options() -> None:
    """Render display toggles for the main view."""
    st.session_state.show_nearby = st.checkbox(
        "Show nearby words",
        value=st.session_state.show_nearby,
        help="Label the words closest to you in the plot and list them above it"
    )


def _launch(vs: "VectorStore", embedder: "BaseEmbedder", words: dict) -> None:
    """
    Build a new session from the entered words.

    The manager is reused across launches so a failed launch leaves the
    current session (and the viewer position) untouched.
    """
    manager = st.session_state.session_manager
    if manager is None or manager.store is not vs or manager.embedder is not embedder:
        manager = SessionManager(vs, embedder, top_k=st.session_state.top_k)
        st.session_state.session_manager = manager

    AppState.begin_launch()
    status = st.empty()

    def update_progress(msg: str):
        st.session_state.progress_log.append(msg)
        status.text(msg)

    try:
        with st.spinner("Building your word space..."):
            session = manager.launch(
                words,
                progress_callback=update_progress,
                top_k=st.session_state.top_k,
            )
    except WordSpaceError as e:
        AppState.set_error(str(e))
        return
    except Exception as e:
        logger.exception("Launch failed")
        AppState.set_error(f"Launch failed: {e}")
        return

    if session is not None:
        AppState.reset_viewer()
        st.rerun()


def render_vocabulary_info(vs: "VectorStore", embedder: "BaseEmbedder") -> None:
    """Render vocabulary statistics."""
    st.markdown("### Vocabulary")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Words", f"{vs.n_words:,}")
    with col2:
        st.metric("Dims", vs.dims)
    st.caption(f"Axis words embedded with: {embedder.name}")


def render_session_info() -> None:
    """Render diagnostics for the active session."""
    session = AppState.current_session()
    if session is None:
        st.caption("No word space launched yet.")
        return

    st.markdown("### Session")
    selection = session.selection
    st.metric("Placed", f"{len(selection):,}")
    st.caption(
        f"{selection.eligible_count:,} of {selection.vocabulary_size:,} words "
        "passed the quality filter"
    )
    if selection.is_degenerate:
        render_warning(f"Fewer than {selection.top_k:,} eligible words; showing all of them.")

    sx, sy, sz = session.space.std_devs
    st.caption(f"Axis spread (stddev): x={sx:.4f} y={sy:.4f} z={sz:.4f}")

    st.download_button(
        "Export words (CSV)",
        data=session.space.to_dataframe().to_csv(index=False),
        file_name=f"word_space_{'_'.join(session.axis_words.as_list())}.csv",
        mime="text/csv",
        use_container_width=True
    )

    if st.session_state.progress_log:
        with st.expander("Launch log"):
            for line in st.session_state.progress_log:
                st.text(line)
