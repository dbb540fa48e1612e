"""
VISUALIZATION: PLOTTING RESPONSE CURVES
=======================================

PURPOSE:
--------
Draw the curves produced by the analyzers. The plotter reads only the
curve triple (analys, xdata, ydata): analys picks the chart title and
series label, xdata is the position axis and ydata the value series.

WHY THIS MATTERS:
-----------------
- A shear diagram with a vertical jump at the middle support, or a moment
  diagram whose peak sits exactly on the zero-shear point, is the quickest
  sanity check that the numbers make physical sense.
- The three stacked panels (deflection, moment, shear) sharing one x-axis
  are the standard way beam results are presented in calculation reports.
"""

import os
from typing import Dict, Mapping, Optional, Union

import matplotlib.pyplot as plt

from .model import AnalysisResult, Curve, QUANTITIES

# =============================================================================
# COLOR PALETTE
# =============================================================================

COLORS = {
    'curve': '#E74C3C',          # Coral red (series line)
    'fill': '#E74C3C',           # Same hue, drawn with alpha
    'beam': '#2C3E50',           # Dark blue-gray (beam axis)
    'background': '#FAFAFA',     # Off-white
    'grid': '#E0E0E0',           # Light gray
    'text': '#2C3E50',
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
FONT_LABEL = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}

# analys -> (title, y-axis label)
CHART_LABELS: Dict[str, tuple] = {
    'deflection': ("Deflection", "v (mm)"),
    'bendingmoment': ("Bending Moment", "M (kN·m)"),
    'shearforce': ("Shear Force", "V (kN)"),
}


def _as_curve(item: Union[Curve, AnalysisResult]) -> Curve:
    return item.equation if isinstance(item, AnalysisResult) else item


def _save(fig, outpath: str) -> None:
    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.savefig(outpath, dpi=150, bbox_inches='tight', facecolor=COLORS['background'])
    plt.close(fig)


def plot_curve(
    item: Union[Curve, AnalysisResult],
    ax=None,
    outpath: Optional[str] = None,
):
    """
    Draw one response curve.

    Parameters:
    -----------
    item : Curve or AnalysisResult
        Only analys, xdata and ydata are read

    ax : matplotlib Axes, optional
        Draw into an existing axes; a new figure is created otherwise

    outpath : str, optional
        Save the figure there (png/pdf/svg) and close it

    Returns:
    --------
    The Axes drawn into

    Raises:
    -------
    ValueError if analys is not a known quantity
    """
    curve = _as_curve(item)
    if curve.analys not in CHART_LABELS:
        raise ValueError(f"Unknown analys '{curve.analys}'. Expected one of {list(CHART_LABELS)}")
    title, ylabel = CHART_LABELS[curve.analys]

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4), facecolor=COLORS['background'])
    else:
        fig = ax.figure
    ax.set_facecolor(COLORS['background'])

    ax.plot(curve.xdata, curve.ydata, color=COLORS['curve'], linewidth=2, label=title)
    ax.fill_between(curve.xdata, curve.ydata, 0.0, color=COLORS['fill'], alpha=0.15)
    ax.axhline(y=0, color=COLORS['beam'], linewidth=1.5)

    ax.set_title(title, fontdict=FONT_TITLE, color=COLORS['text'])
    ax.set_xlabel("x (m)", fontdict=FONT_LABEL)
    ax.set_ylabel(ylabel, fontdict=FONT_LABEL)
    ax.grid(True, color=COLORS['grid'], alpha=0.8)
    ax.legend(loc='upper right')

    for spine in ['top', 'right']:
        ax.spines[spine].set_visible(False)

    if outpath is not None:
        _save(fig, outpath)
    return ax


def plot_beam_curves(
    results: Mapping[str, Union[Curve, AnalysisResult]],
    outpath: Optional[str] = None,
    title: Optional[str] = None,
):
    """
    Deflection, bending moment and shear force stacked on a shared x-axis.

    Quantities missing from results are skipped. Returns the Figure (closed
    when saved to outpath).
    """
    present = [q for q in QUANTITIES if q in results]
    if not present:
        raise ValueError("No curves to plot")

    fig, axes = plt.subplots(
        len(present), 1, figsize=(10, 3.5 * len(present)), sharex=True,
        facecolor=COLORS['background'], squeeze=False,
    )
    for ax, quantity in zip(axes[:, 0], present):
        plot_curve(results[quantity], ax=ax)

    if title:
        fig.suptitle(title, fontsize=16, fontweight='bold', color=COLORS['text'])
    fig.tight_layout()

    if outpath is not None:
        _save(fig, outpath)
    return fig
