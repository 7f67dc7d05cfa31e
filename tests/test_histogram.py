import pytest

from autoheuristic.histogram import (
    Histogram,
    compute_histogram_bins,
    compute_histogram_bins_threaded,
    compute_subset_histogram,
    read_integer_text_file,
)


def test_one_value_per_bin():
    hist = compute_histogram_bins([0, 1, 2, 3], 4, 0, 4)
    assert hist.bin_counts == [1.0, 1.0, 1.0, 1.0]
    assert hist.bin_width == 1.0


def test_range_is_half_open():
    hist = compute_histogram_bins([0, 10, -1, 11], 5, 0, 10)
    assert sum(hist.bin_counts) == 1
    assert hist.bin_counts[0] == 1


def test_total_equals_values_in_range():
    data = list(range(-50, 150, 3))
    hist = compute_histogram_bins(data, 7, 0, 100)
    assert sum(hist.bin_counts) == sum(1 for v in data if 0 <= v < 100)
    assert len(hist.bin_counts) == 7


def test_histogram_keeps_parameters():
    hist = compute_histogram_bins([], 10, 5.0, 25.0)
    assert (hist.bin_count, hist.min_value, hist.max_value) == (10, 5.0, 25.0)
    assert hist.bin_counts == [0.0] * 10


def test_invalid_bin_count_raises():
    with pytest.raises(ValueError):
        compute_histogram_bins([1, 2], 0, 0, 10)


def test_bin_centers():
    hist = Histogram(bin_count=3, min_value=0.0, max_value=3.0, bin_width=1.0,
                     bin_counts=[0.0, 0.0, 0.0])
    assert hist.bin_centers() == [0.5, 1.5, 2.5]


def test_bin_centers_lie_inside_range():
    hist = compute_histogram_bins([1, 2, 3], 13, -7, 91)
    centers = hist.bin_centers()
    assert len(centers) == 13
    assert all(hist.min_value < c < hist.max_value for c in centers)
    assert centers == sorted(centers)


def test_threaded_matches_plain():
    data = [(i * 37) % 1000 for i in range(5000)]
    plain = compute_histogram_bins(data, 50, 0, 1000)
    threaded = compute_histogram_bins_threaded(data, 50, 0, 1000)
    assert threaded.bin_counts == plain.bin_counts
    assert threaded.bin_width == plain.bin_width


def test_threaded_reports_progress():
    reports = []
    data = list(range(100))
    hist = compute_histogram_bins_threaded(data, 10, 0, 100, reports.append)
    assert sum(hist.bin_counts) == len(data)
    assert reports
    assert 0.0 in reports
    assert all(0.0 <= r < 1.0 for r in reports)


def test_threaded_empty_data():
    hist = compute_histogram_bins_threaded([], 4, 0, 4, None)
    assert hist.bin_counts == [0.0] * 4


def test_subset_matches_full_computation():
    data = [(i * 13) % 400 for i in range(2000)]
    subset = compute_subset_histogram(data, 100, 200, 20)
    full = compute_histogram_bins(data, 20, 100, 200)
    assert subset.bin_counts == full.bin_counts
    assert (subset.min_value, subset.max_value, subset.bin_count) == (100, 200, 20)


def test_read_integers(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2\n-3\n\t+4\n", encoding="utf-8")
    assert read_integer_text_file(path) == [1, 2, -3, 4]


def test_read_stops_at_bad_token(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5 6 x 7\n", encoding="utf-8")
    assert read_integer_text_file(path) == [5, 6]


def test_read_stops_after_partial_token(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("8 9abc 10\n", encoding="utf-8")
    assert read_integer_text_file(path) == [8, 9]


def test_read_stops_at_out_of_range(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2147483647 2147483648 3\n", encoding="utf-8")
    assert read_integer_text_file(path) == [1, 2147483647]


def test_read_missing_file_is_empty(tmp_path):
    assert read_integer_text_file(tmp_path / "missing.txt") == []