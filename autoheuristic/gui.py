"""Interactive histogram viewer with range selections and section testing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .conversion import convert_and_mask_little_endian_binary, exec_command
from .histogram import (
    Histogram,
    compute_histogram_bins,
    compute_subset_histogram,
    read_integer_text_file,
)

COMMAND_PREFIX = "wsl"
SECTION_MASK = "000000FF"
SUB_HISTOGRAM_BINS = 500

DEFAULT_BIN_COUNT = 1000
DEFAULT_MIN_VALUE = 0.0
DEFAULT_MAX_VALUE = 30000.0
BIN_SLIDER_RANGE = (100, 2000)
RANGE_SLIDER_LIMITS = (0.0, 500000.0)

Color = Tuple[float, float, float, float]
SELECTION_COLOR: Color = (1.0, 0.0, 0.0, 0.25)


@dataclass
class Selection:
    """A value range picked out of the main histogram."""

    x_min: int = int(DEFAULT_MIN_VALUE)
    x_max: int = int(DEFAULT_MAX_VALUE)
    color: Color = SELECTION_COLOR

    def output_stem(self, data_dir) -> Path:
        """Path, without extension, of the files written when testing this range."""
        return Path(data_dir) / f"u32_output_range_{self.x_min}_{self.x_max}"

    def title(self, index: int) -> str:
        """Plot title for the selection at zero-based position ``index``."""
        return f"Selection {index + 1} [{self.x_min} - {self.x_max}]"


class SubHistogramCache:
    """Keeps sub-histograms so each title and range is computed once."""

    def __init__(self) -> None:
        self._entries: Dict[str, Histogram] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, title: str, data: Sequence[int], selection: Selection) -> Histogram:
        """Return the sub-histogram for ``selection``, computing it on first use."""
        key = f"{title}_{float(selection.x_min):f}_{float(selection.x_max):f}"
        hist = self._entries.get(key)
        if hist is None:
            hist = compute_subset_histogram(
                data, selection.x_min, selection.x_max, SUB_HISTOGRAM_BINS
            )
            self._entries[key] = hist
        return hist


def run_section_test(
    selection: Selection,
    data_dir,
    source_bin,
    runner: Callable[[str], str] = exec_command,
) -> str:
    """Extract the selected range, mask it to low bytes and run the entropy assessment.

    Returns the output of the assessment command.
    """
    stem = selection.output_stem(data_dir)
    binary_path = stem.with_name(stem.name + ".bin")
    masked_path = stem.with_name(stem.name + "_masked.bin")

    select_cmd = (
        f"{COMMAND_PREFIX} u32-selectrange {source_bin} "
        f"{selection.x_min} {selection.x_max} > {binary_path}"
    )
    output = runner(select_cmd)
    print(f"u32-selectrange Output:\n{output}")

    convert_and_mask_little_endian_binary(binary_path, masked_path, SECTION_MASK)
    print(f"Masked big-endian output written to: {masked_path}")

    output = runner(f"{COMMAND_PREFIX} ea_non_iid -v {masked_path}")
    print(f"ea_non_iid Results:\n{output}")
    return output


@dataclass
class _GuiState:
    data: List[int]
    hist: Histogram
    selections: List[Selection] = field(default_factory=list)
    active: Optional[int] = None
    cache: SubHistogramCache = field(default_factory=SubHistogramCache)

    def recompute(self, bin_count: int, min_value: float, max_value: float) -> bool:
        hist = self.hist
        if (hist.bin_count, hist.min_value, hist.max_value) == (
            bin_count,
            min_value,
            max_value,
        ):
            return False
        self.hist = compute_histogram_bins(self.data, bin_count, min_value, max_value)
        return True


def run_gui(byte_filename, decimal_filename) -> int:
    """Show the histogram window for the samples in ``decimal_filename``."""
    import matplotlib.pyplot as plt
    from matplotlib.widgets import Button, RangeSlider, Slider, SpanSelector

    data = read_integer_text_file(decimal_filename)
    print(f"Computing histogram for {len(data)} data points...")
    state = _GuiState(
        data=data,
        hist=compute_histogram_bins(
            data, DEFAULT_BIN_COUNT, DEFAULT_MIN_VALUE, DEFAULT_MAX_VALUE
        ),
    )
    data_dir = Path(decimal_filename).parent
    source_bin = data_dir / "u32_output.bin"

    fig = plt.figure("Auto Heuristic", figsize=(12.8, 8.0))
    main_ax = fig.add_axes([0.30, 0.55, 0.65, 0.40])
    main_artists: list = []
    sub_axes: list = []

    def draw_main() -> None:
        for artist in main_artists:
            artist.remove()
        main_artists.clear()
        hist = state.hist
        bars = main_ax.bar(
            hist.bin_centers(), hist.bin_counts, width=hist.bin_width, align="center"
        )
        main_artists.extend(bars)
        for sel in state.selections:
            main_artists.append(main_ax.axvspan(sel.x_min, sel.x_max, color=sel.color))
        main_ax.set_title("Main Histogram")
        main_ax.set_xlabel("Value")
        main_ax.set_ylabel("Frequency")
        main_ax.relim()
        main_ax.autoscale_view()

    def draw_subs() -> None:
        for ax in sub_axes:
            ax.remove()
        sub_axes.clear()
        count = len(state.selections)
        if not count:
            return
        rows = math.ceil(count / 2)
        height = 0.40 / rows
        for position, sel in enumerate(state.selections):
            row, col = divmod(position, 2)
            ax = fig.add_axes(
                [0.05 + col * 0.47, 0.42 - (row + 1) * height + 0.03, 0.43, height - 0.05]
            )
            title = sel.title(position)
            hist = state.cache.get(title, state.data, sel)
            ax.bar(
                hist.bin_centers(),
                hist.bin_counts,
                width=hist.bin_width,
                color=sel.color[:3],
            )
            ax.set_title(title, fontsize="small")
            sub_axes.append(ax)

    def redraw() -> None:
        draw_main()
        draw_subs()
        fig.canvas.draw_idle()

    bins_slider = Slider(
        fig.add_axes([0.05, 0.90, 0.18, 0.03]),
        "Bins",
        BIN_SLIDER_RANGE[0],
        BIN_SLIDER_RANGE[1],
        valinit=DEFAULT_BIN_COUNT,
        valstep=1,
    )
    range_slider = RangeSlider(
        fig.add_axes([0.05, 0.84, 0.18, 0.03]),
        "Range",
        RANGE_SLIDER_LIMITS[0],
        RANGE_SLIDER_LIMITS[1],
        valinit=(DEFAULT_MIN_VALUE, DEFAULT_MAX_VALUE),
    )
    add_button = Button(fig.add_axes([0.05, 0.76, 0.18, 0.05]), "Add Selection")
    test_button = Button(fig.add_axes([0.05, 0.69, 0.18, 0.05]), "Test Section")

    def on_histogram_change(_value) -> None:
        low, high = range_slider.val
        if state.recompute(int(bins_slider.val), float(low), float(high)):
            redraw()

    def on_add(_event) -> None:
        state.selections.append(Selection())
        state.active = len(state.selections) - 1
        redraw()

    def on_span(x_min: float, x_max: float) -> None:
        if state.active is None:
            state.selections.append(Selection())
            state.active = len(state.selections) - 1
        sel = state.selections[state.active]
        sel.x_min, sel.x_max = int(x_min), int(x_max)
        redraw()

    def on_test(_event) -> None:
        if state.active is None:
            print("No selection to test.")
            return
        run_section_test(state.selections[state.active], data_dir, source_bin)

    bins_slider.on_changed(on_histogram_change)
    range_slider.on_changed(on_histogram_change)
    add_button.on_clicked(on_add)
    test_button.on_clicked(on_test)
    span = SpanSelector(main_ax, on_span, "horizontal", useblit=False)

    fig._autoheuristic_widgets = (bins_slider, range_slider, add_button, test_button, span)

    redraw()
    plt.show()
    plt.close(fig)
    return 0