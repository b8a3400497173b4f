"""
Interactive 3D word-cloud visualization for a word-space session.
Uses Plotly; per-word opacity comes from the LOD index.
"""

from typing import Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from word_space.core.lod import NearbyWord, VisibilityFrame
from word_space.core.session import WordSpaceSession
import config


def word_color(t: float, alpha: float = 1.0) -> str:
    """
    RGBA color for a word with emphasis t in [0, 1].

    Brighter for words with stronger positions.
    """
    r = round(140 + 115 * t)
    g = round(140 + 90 * t)
    b = round(170 + 85 * t)
    return f"rgba({r}, {g}, {b}, {alpha:.3f})"


class WordSpacePlotBuilder:
    """
    Builds Plotly 3D figures of a session's word cloud.

    Features:
    - Words colored and sized by emphasis, faded by distance (LOD)
    - Culled words omitted
    - Beacons as labelled landmarks in their axis colors
    - Viewer position marker and nearby-word labels
    """

    COLORS = {
        "viewer": "#ffffff",
        "nearby": "#f59e0b",  # Amber
        "background": "#060610",
    }

    def __init__(
        self,
        height: int = config.PLOT_HEIGHT,
        width: int = config.PLOT_WIDTH
    ):
        """
        Initialize the plot builder.

        Args:
            height: Plot height in pixels
            width: Plot width in pixels
        """
        self.height = height
        self.width = width

    def build(
        self,
        session: WordSpaceSession,
        frame: Optional[VisibilityFrame] = None,
        nearby: Optional[Sequence[NearbyWord]] = None,
        viewer_position: Optional[Sequence[float]] = None,
    ) -> go.Figure:
        """
        Build the figure.

        Args:
            session: Session to draw
            frame: LOD pass for the current viewer position; without one every
                word is drawn at its base opacity
            nearby: Nearby words to label
            viewer_position: Viewer (x, y, z) to mark

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()

        self._add_words(fig, session, frame)

        if nearby:
            self._add_nearby_labels(fig, session, nearby)

        for beacon in session.beacons:
            color = config.BEACON_COLORS.get(beacon.axis_role.value, "#ffffff")
            fig.add_trace(go.Scatter3d(
                x=[beacon.x],
                y=[beacon.y],
                z=[beacon.z],
                mode="markers+text",
                marker=dict(color=color, size=10, symbol="diamond", opacity=1.0),
                text=[beacon.word.upper()],
                textposition="top center",
                textfont=dict(color=color, size=14),
                hovertemplate=f"<b>{beacon.word}</b><br>{beacon.axis_role.value}<extra></extra>",
                name=f"{beacon.axis_role.value} {beacon.word}",
            ))

        if viewer_position is not None:
            fig.add_trace(go.Scatter3d(
                x=[viewer_position[0]],
                y=[viewer_position[1]],
                z=[viewer_position[2]],
                mode="markers",
                marker=dict(
                    color=self.COLORS["viewer"],
                    size=6,
                    symbol="circle",
                    line=dict(color="white", width=2),
                ),
                hovertemplate="<b>You</b><extra></extra>",
                name="You",
            ))

        self._apply_layout(fig)
        return fig

    def _add_words(
        self,
        fig: go.Figure,
        session: WordSpaceSession,
        frame: Optional[VisibilityFrame]
    ) -> None:
        """Add the word cloud trace (visible words only)."""
        index = session.index
        positions = session.space.positions
        emphasis = index.emphasis

        if frame is None:
            shown = np.arange(len(index))
            opacities = index.base_opacity
        else:
            shown = np.flatnonzero(frame.visible)
            opacities = frame.opacities

        words = index.words
        fig.add_trace(go.Scatter3d(
            x=positions[shown, 0],
            y=positions[shown, 1],
            z=positions[shown, 2],
            mode="markers",
            marker=dict(
                color=[word_color(emphasis[i], opacities[i]) for i in shown],
                size=[2 + 3 * emphasis[i] for i in shown],
            ),
            text=[words[i] for i in shown],
            hovertemplate="%{text}<extra></extra>",
            name="Words",
        ))

    def _add_nearby_labels(
        self,
        fig: go.Figure,
        session: WordSpaceSession,
        nearby: Sequence[NearbyWord]
    ) -> None:
        positions = session.space.positions
        idx = [w.index for w in nearby]
        fig.add_trace(go.Scatter3d(
            x=positions[idx, 0],
            y=positions[idx, 1],
            z=positions[idx, 2],
            mode="markers+text",
            marker=dict(color=self.COLORS["nearby"], size=5, opacity=0.9),
            text=[w.word for w in nearby],
            textposition="middle right",
            textfont=dict(color=self.COLORS["nearby"], size=12),
            hovertemplate="%{text}<extra></extra>",
            name="Nearby",
        ))

    def _apply_layout(self, fig: go.Figure) -> None:
        """Dark 3D layout without tick labels."""
        hidden_axis = dict(
            showgrid=True,
            gridcolor="rgba(102, 126, 234, 0.2)",
            showticklabels=False,
            title="",
            zeroline=False,
            showbackground=False,
        )
        fig.update_layout(
            height=self.height,
            width=self.width,
            template="plotly_dark",
            paper_bgcolor="rgba(0,0,0,0)",
            scene=dict(
                bgcolor=self.COLORS["background"],
                xaxis=hidden_axis,
                yaxis=hidden_axis,
                zaxis=hidden_axis,
                aspectmode="data",
            ),
            showlegend=True,
            legend=dict(
                yanchor="top",
                y=0.99,
                xanchor="left",
                x=0.01,
                bgcolor="rgba(0,0,0,0.5)",
                font=dict(size=10)
            ),
            margin=dict(l=0, r=0, t=30, b=0),
        )
