"""Plotting API for the mcorr_vcf package.

Import convenience: ``from mcorr_vcf.plot import plot_correlation_profile``.
"""

from .correlation_plots import *  # noqa: F401,F403

__all__ = ["plot_correlation_profile"]
