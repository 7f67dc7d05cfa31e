# autoheuristic

Tools for working with raw entropy samples. With them you can:

- convert and mask sample files,
- plot a histogram of the samples,
- pick value ranges in the histogram,
- pass a chosen range to external range-selection and entropy-assessment commands.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
autoheuristic [--input FILE] [--binary FILE] [--output FILE] [--mask HEX]
              [--convert] [--extract] [--no-gui]
```

| Option | Default | Effect |
| --- | --- | --- |
| `--input` | `../../data/entropy_output.data` | Decimal sample file, one value per line. |
| `--binary` | `../../data/u32_output.bin` | Target of `--convert`. |
| `--output` | `../../data/masked_output.bin` | Target of `--extract`. |
| `--mask` | `000000FF` | Hex mask used by `--extract`. |
| `--convert` | off | Writes the input as 32-bit little-endian words to `--binary`. |
| `--extract` | off | Writes the masked bytes of each input value to `--output`. |
| `--no-gui` | off | Exits instead of opening the viewer. |

Before anything else, the command prints two lines:

- the number of samples converted (0 without `--convert`),
- the decimation upper bound, which is that number divided by 1,000,000.

If a file cannot be opened, or the mask is invalid, the command prints an error and exits with status 1.

### The viewer

Unless `--no-gui` is given, a matplotlib window opens on the samples read from `--input`. It has these controls:

- **Main histogram.** Starts with 1000 bins over the range 0 to 30000.
- **Bins** slider. Sets the bin count, from 100 to 2000.
- **Range** slider. Sets the histogram range, from 0 to 500000.
- **Add Selection** button. Adds a selection covering 0 to 30000 and makes it the active one.
- **Span select.** Dragging across the main histogram sets the range of the active selection. If there is no selection yet, one is created first.
- **Sub-histograms.** Each selection is shaded on the main histogram and gets its own sub-histogram of 500 bins.
- **Test Section** button. Runs the section test on the active selection. The range data is read from `u32_output.bin` in the same directory as the input file.

## Library use

### Masks (`autoheuristic.masking`)

```python
from autoheuristic.masking import parse_hex_mask, masked_bytes

mask = parse_hex_mask("000000FF")    # 255
masked_bytes(0x12345678, mask)       # b"\x78"
```

`parse_hex_mask` reads a mask of hex digits:

- It accepts an optional `0x` prefix.
- It stops at the first character that is not a hex digit.
- A string longer than 16 characters raises `ValueError`.

`masked_bytes` returns the bytes of the value in the positions where the mask byte is non-zero, most significant first. Only the low 8 bytes are considered.

### File conversion (`autoheuristic.conversion`)

```python
from autoheuristic.conversion import (
    convert_decimal_file_to_binary,
    extract_masked_bytes_from_decimals,
    convert_and_mask_little_endian_binary,
    exec_command,
)

count = convert_decimal_file_to_binary("samples.txt", "samples.bin")
extract_masked_bytes_from_decimals("samples.txt", "masked.bin", "000000FF")
convert_and_mask_little_endian_binary("samples.bin", "masked.bin", "000000FF")
```

- `convert_decimal_file_to_binary` writes each decimal line as a 32-bit little-endian word. It returns the number of values written.
- `extract_masked_bytes_from_decimals` reads each line as a 64-bit unsigned value and writes its masked bytes. It returns the number of values processed.
- `convert_and_mask_little_endian_binary` reads 32-bit little-endian words and masks them.
  - With the mask `000000FF` it writes one byte per word.
  - With any other mask it writes four big-endian bytes per word.
  - A trailing partial word is ignored.
- `exec_command` runs a shell command and returns its standard output.

The first two functions skip lines they cannot parse and log a warning through the `logging` module.

### Histograms (`autoheuristic.histogram`)

```python
from autoheuristic.histogram import (
    read_integer_text_file,
    compute_histogram_bins,
    compute_histogram_bins_threaded,
    compute_subset_histogram,
)

data = read_integer_text_file("samples.txt")
hist = compute_histogram_bins(data, 1000, 0, 30000)
hist.bin_centers()
sub = compute_subset_histogram(data, 1000, 2000, 500)
```

- `Histogram` holds `bin_count`, `min_value`, `max_value`, `bin_width` and `bin_counts`.
- A value counts toward a bin when it lies in the half-open range `[min_value, max_value)`.
- A non-positive bin count raises `ValueError`.
- `compute_histogram_bins_threaded` gives the same counts as `compute_histogram_bins`. It spreads the work across threads. An optional progress callback is called every million samples.
- `read_integer_text_file` reads whitespace-separated 32-bit integers and stops at the first entry it cannot read. If the file cannot be opened, it returns an empty list.

### Selections and section tests (`autoheuristic.gui`)

- `Selection` holds a value range (`x_min`, `x_max`) and a colour.
- `SubHistogramCache` computes each selection's 500-bin sub-histogram once.
- `run_section_test(selection, data_dir, source_bin, runner)` runs the following steps and returns the assessment output:
  1. Runs `wsl u32-selectrange <source_bin> <min> <max> > <data_dir>/u32_output_range_<min>_<max>.bin`.
  2. Masks that file to low bytes, writing `..._masked.bin`.
  3. Runs `wsl ea_non_iid -v` on the masked file.

  `runner` defaults to `exec_command`. Passing your own callable replaces the shell.
- `run_gui(byte_filename, decimal_filename)` opens the viewer.

## What the package does not do

The package has no range-selection or entropy-assessment code of its own. "Test Section" and `run_section_test` call the external commands `u32-selectrange` and `ea_non_iid`, through `wsl`. Those commands must be installed and reachable that way, or you must pass a `runner` of your own.