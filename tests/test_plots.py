import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402

from mcorr_vcf.plot import plot_correlation_profile  # noqa: E402


def _table():
    return pd.DataFrame({
        "l": [0, 10, 20],
        "m": [0.4, 0.9, 0.8],
        "n": [0, 0, 0],
        "v": [5, 4, 3],
        "t": ["Ks", "P2", "P2"],
        "b": ["all"] * 3,
    })


def test_returns_figure_without_path():
    fig = plot_correlation_profile(_table())
    ax = fig.axes[0]
    assert "Ks = 0.4" in ax.get_title()
    assert len(ax.lines[0].get_xdata()) == 2


def test_saves_to_path(tmp_path):
    out = tmp_path / "p.png"
    assert plot_correlation_profile(_table(), output_path=str(out)) is None
    assert out.exists()


def test_empty_table():
    fig = plot_correlation_profile(pd.DataFrame(columns=["l", "m", "n", "v", "t", "b"]))
    assert fig.axes[0].get_title() == "Genotype correlation profile"
