"""
ssbswpc.visualization
=====================

Plotly figures for inspecting SSB + SWPC results.

``plot_diagnostics`` overlays the spectrum of the raw series, the
spectrum after SSB modulation and the transfer function of the
sliding window's implicit high-pass filter, shading the band below
the filter's -3 dB cutoff.  A good modulation frequency moves the
modulated spectrum out of the shaded band.  ``plot_connectivity``
draws the correlation time series of every channel pair, and
``write_report`` assembles figures into a single HTML page.

Note
----
Plotly must be installed in the environment for this module to
function.
"""

from __future__ import annotations

import html
import os
from typing import Optional, Sequence

import numpy as np
import plotly.graph_objs as go
import plotly.io as pio

from .diagnostics import HALF_POWER
from .model import DiagnosticSpectra, SSBSWPCResult


def plot_diagnostics(spectra: DiagnosticSpectra) -> go.Figure:
    """Plot raw and modulated spectra against the high-pass response."""
    f = spectra.frequencies
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=f, y=spectra.raw_spectrum, mode='lines', name='Tc', line=dict(width=2)))
    fig.add_trace(go.Scatter(
        x=f, y=spectra.modulated_spectrum, mode='lines', name='modulated Tc', line=dict(width=2),
    ))
    fig.add_trace(go.Scatter(
        x=f, y=spectra.transfer_function, mode='lines', name='HPF transfer function',
        line=dict(color='black', dash='dash', width=2),
    ))
    if np.isfinite(spectra.cutoff_freq):
        fig.add_trace(go.Scatter(
            x=[0.0, spectra.cutoff_freq, spectra.cutoff_freq, 0.0],
            y=[0.0, 0.0, HALF_POWER, HALF_POWER],
            fill='toself',
            fillcolor='rgba(0, 0, 0, 0.5)',
            line=dict(width=0),
            mode='lines',
            name='HPF cutoff',
        ))
    fig.update_layout(
        title=f'SSB modulation vs. {spectra.window_type.value} window high-pass filter',
        xaxis=dict(title='Freq (Hz)', range=[0.0, spectra.nyquist], showgrid=True),
        yaxis=dict(
            title='Normalized amplitude',
            range=[0.0, 1.4],
            tickvals=[0.0, HALF_POWER, 1.0],
            ticktext=['0', '-3db', '1'],
            showgrid=True,
        ),
        legend=dict(font=dict(size=12)),
        height=450,
    )
    return fig


def plot_connectivity(result: SSBSWPCResult, labels: Optional[Sequence[str]] = None) -> go.Figure:
    """Plot the correlation time series of every channel pair."""
    df = result.to_dataframe(list(labels) if labels is not None else None)
    fig = go.Figure()
    for column in df.columns:
        fig.add_trace(go.Scatter(x=df.index, y=df[column], mode='lines', name=column))
    fig.update_layout(
        title='SSB + SWPC connectivity',
        xaxis_title='Window center (sample)',
        yaxis=dict(title='r', range=[-1.05, 1.05]),
        height=400,
    )
    return fig


def write_report(figures: Sequence[go.Figure], path: str, title: str = 'SSB + SWPC report') -> str:
    """Write ``figures`` into one HTML file and return its path.

    Plotly.js is embedded once, with the first figure.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    parts = []
    for i, fig in enumerate(figures):
        parts.append(pio.to_html(
            fig, include_plotlyjs=(i == 0), full_html=False, config={'displayModeBar': False},
        ))
    content = (
        "<html><head><meta charset='utf-8'><title>" + html.escape(title) + "</title></head><body>"
        + f"<h1>{html.escape(title)}</h1>" + "".join(parts) + "</body></html>"
    )
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


__all__ = [
    'plot_diagnostics',
    'plot_connectivity',
    'write_report',
]
