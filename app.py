"""
Word Space: Fly Through Your Own Semantic Axes
Main Streamlit application.

Run with: streamlit run app.py
"""

import logging

import streamlit as st

from word_space.core.vector_store import VectorStore
from word_space.embedders import get_embedder
from word_space.embedders.base import BaseEmbedder
from word_space.loaders import VocabularyLoader, load_vocabulary
from word_space.ui import inject_styles, init_session_state, render_header
from word_space.ui import main_view, sidebar
from word_space.ui.state import AppState
import config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Page Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Word Space",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="expanded"
)


# -----------------------------------------------------------------------------
# Data Loading - Cached to survive refreshes
# -----------------------------------------------------------------------------

@st.cache_resource(show_spinner=False)
def get_vector_store() -> VectorStore:
    """
    Load the vocabulary blob once.
    Cached so it survives page refreshes.
    """
    return load_vocabulary(config.DATA_DIR)


@st.cache_resource(show_spinner=False)
def get_axis_embedder(name: str, _vs: VectorStore) -> BaseEmbedder:
    """Get the embedder used for the six axis words."""
    if name == "vocabulary":
        return get_embedder(name, store=_vs)
    return get_embedder(name)


def main():
    """Main application entry point."""
    init_session_state()
    inject_styles()
    render_header()

    loader = VocabularyLoader(config.DATA_DIR)
    if not loader.exists():
        st.warning("No vocabulary found.")
        st.markdown(f"""
        **To get started:**
        1. Build `{config.VOCAB_FILENAME}` and `{config.EMBEDDINGS_FILENAME}` offline
        2. Place them in `{config.DATA_DIR}`
        3. Optionally add `{config.MANIFEST_FILENAME}` with the dimensionality
        """)
        st.stop()

    try:
        with st.spinner("Loading vocabulary..."):
            vs = get_vector_store()
        embedder = get_axis_embedder(config.DEFAULT_EMBEDDER, vs)
    except Exception as e:
        logger.exception("Vocabulary load failed")
        st.error(f"Could not load vocabulary: {e}")
        st.stop()

    sidebar.render_sidebar(vs, embedder)
    main_view.render_last_error()

    session = AppState.current_session()
    if session is None:
        main_view.render_welcome()
        return

    main_view.render_main(session)


if __name__ == "__main__":
    main()
