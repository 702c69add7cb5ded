import random

import pytest

from mcorr_vcf.metrics import SlidingWindowPairer

from conftest import record


def collect_pairs(records, max_lag):
    pairs = []

    def on_window(window):
        anchor = window[0]
        for other in window:
            pairs.append((anchor.position, other.position))

    pairer = SlidingWindowPairer(max_lag, on_window)
    for rec in records:
        pairer.feed(rec)
    pairer.flush()
    return pairs, pairer


def brute_force_pairs(positions, max_lag):
    out = []
    for i in range(len(positions)):
        for j in range(i, len(positions)):
            if positions[j] - positions[i] < max_lag:
                out.append((positions[i], positions[j]))
    return out


@pytest.mark.parametrize("max_lag", [1, 2, 5, 17, 50, 300])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_window_completeness(max_lag, seed):
    rng = random.Random(seed)
    positions = sorted(rng.sample(range(1, 2000), 120))
    pairs, _ = collect_pairs([record("1", p) for p in positions], max_lag)
    expected = brute_force_pairs(positions, max_lag)
    assert sorted(pairs) == sorted(expected)
    assert len(pairs) == len(set(pairs))


def test_triggering_record_is_kept():
    pairs, pairer = collect_pairs([record("1", p) for p in (100, 150, 600)], 300)
    assert pairs == [(100, 100), (100, 150), (150, 150), (600, 600)]
    assert pairer.windows_dispatched == 3
    assert not pairer.buffer


def test_pairs_never_cross_chromosomes():
    windows = []
    pairer = SlidingWindowPairer(300, lambda w: windows.append([(r.chromosome, r.position) for r in w]))
    for rec in [record("1", 100), record("1", 120), record("2", 130), record("2", 140)]:
        pairer.feed(rec)
    pairer.flush()
    assert windows == [
        [("1", 100), ("1", 120)],
        [("1", 120)],
        [("2", 130), ("2", 140)],
        [("2", 140)],
    ]


def test_max_lag_zero_gives_self_pairs_only():
    pairs, _ = collect_pairs([record("1", p) for p in (1, 2, 2, 10)], 0)
    assert pairs == [(1, 1), (2, 2), (2, 2), (10, 10)]


def test_duplicate_positions_pair_at_lag_zero():
    pairs, _ = collect_pairs([record("1", 5), record("1", 5)], 10)
    assert pairs == [(5, 5), (5, 5), (5, 5)]


def test_negative_max_lag_rejected():
    with pytest.raises(ValueError):
        SlidingWindowPairer(-1, lambda w: None)


def test_anchor_is_first_of_each_window():
    anchors = []
    pairer = SlidingWindowPairer(10, lambda w: anchors.append(w[0].position))
    for p in (1, 3, 12, 14, 30):
        pairer.feed(record("1", p))
    pairer.flush()
    assert anchors == [1, 3, 12, 14, 30]
