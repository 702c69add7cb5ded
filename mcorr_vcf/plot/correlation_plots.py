"""Correlation profile plot: P2 against lag, Ks in the title."""

from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt

from .base import set_plot_style, save_figure

__all__ = ["plot_correlation_profile"]


def plot_correlation_profile(
	table: pd.DataFrame,
	*,
	output_path: Optional[str] = None,
	title: str = "Genotype correlation profile",
	color: str = "#1565C0",
	figsize: Tuple[int, int] = (8, 5),
) -> Optional[plt.Figure]:
	"""Line + marker plot of the P2 rows of a correlation table.

	``table`` has the columns produced by ``correlation_table``.
	"""
	set_plot_style()
	p2 = table[table["t"] == "P2"]
	ks = table.loc[table["t"] == "Ks", "m"]
	fig, ax = plt.subplots(figsize=figsize)
	if not p2.empty:
		sns.lineplot(data=p2, x="l", y="m", marker="o", color=color, ax=ax)
	if not ks.empty:
		ax.set_title(f"{title}\n(Ks = {float(ks.iloc[0]):g}, {int(p2['v'].sum()):,} site pairs)")
	else:
		ax.set_title(title)
	ax.set_xlabel("Distance (bp)")
	ax.set_ylabel("P2 / Ks")
	fig.tight_layout()
	return save_figure(fig, output_path)
