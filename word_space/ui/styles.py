"""
Theme constants and CSS injection for Word Space.
Centralizes all styling in one place for easy customization.
"""

import streamlit as st
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Central theme configuration - all colors in one place."""
    # Primary palette (gradient)
    primary_start: str = "#667eea"
    primary_end: str = "#764ba2"

    # Backgrounds
    bg_dark: str = "#060610"
    bg_medium: str = "#0f0f23"
    bg_card: str = "rgba(30, 30, 46, 0.8)"

    # Text
    text_primary: str = "#e2e8f0"
    text_secondary: str = "#94a3b8"

    # Status
    error: str = "#ef4444"
    warning: str = "#f59e0b"
    info: str = "#667eea"

    border_subtle: str = "rgba(102, 126, 234, 0.3)"


THEME = Theme()


def get_css() -> str:
    """Generate CSS using theme constants."""
    return f"""
<style>
    .stApp {{
        background: linear-gradient(135deg, {THEME.bg_dark} 0%, {THEME.bg_medium} 100%);
    }}

    .ws-header {{
        font-family: 'JetBrains Mono', 'Fira Code', monospace;
        background: linear-gradient(90deg, {THEME.primary_start} 0%, {THEME.primary_end} 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        font-size: 2.5rem;
        font-weight: 700;
        margin-bottom: 0;
    }}

    .ws-subheader {{
        color: {THEME.text_secondary};
        font-size: 1rem;
        margin-top: 0;
    }}

    .ws-nearby {{
        font-family: 'SF Mono', 'Fira Code', 'Consolas', monospace;
        color: {THEME.text_primary};
        background: {THEME.bg_card};
        border: 1px solid {THEME.border_subtle};
        border-radius: 8px;
        padding: 0.5rem 1rem;
        text-align: center;
    }}

    .ws-gauge-label {{
        font-family: 'SF Mono', 'Fira Code', 'Consolas', monospace;
        font-size: 0.8rem;
    }}

    .ws-error, .ws-warning, .ws-info {{
        border-radius: 8px;
        padding: 0.75rem 1rem;
        margin: 0.5rem 0;
        color: {THEME.text_primary};
    }}
    .ws-error {{ border-left: 4px solid {THEME.error}; background: rgba(239, 68, 68, 0.15); }}
    .ws-warning {{ border-left: 4px solid {THEME.warning}; background: rgba(245, 158, 11, 0.15); }}
    .ws-info {{ border-left: 4px solid {THEME.info}; background: rgba(102, 126, 234, 0.15); }}
</style>
"""


def inject_styles() -> None:
    """Inject CSS styles into the Streamlit app."""
    st.markdown(get_css(), unsafe_allow_html=True)


def render_header() -> None:
    """Render the styled application header."""
    st.markdown('<h1 class="ws-header">Word Space</h1>', unsafe_allow_html=True)
    st.markdown(
        '<p class="ws-subheader">Pick six words. Fly through the space they define.</p>',
        unsafe_allow_html=True
    )


def render_error(message: str) -> None:
    """Render a styled error message."""
    st.markdown(f'<div class="ws-error">{message}</div>', unsafe_allow_html=True)


def render_warning(message: str) -> None:
    """Render a styled warning message."""
    st.markdown(f'<div class="ws-warning">{message}</div>', unsafe_allow_html=True)


def render_info(message: str) -> None:
    """Render a styled info message."""
    st.markdown(f'<div class="ws-info">{message}</div>', unsafe_allow_html=True)
