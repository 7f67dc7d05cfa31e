from autoheuristic.cli import main
from autoheuristic.masking import masked_bytes, parse_hex_mask


def test_default_run_reports_zero_samples(capsys):
    assert main(["--no-gui"]) == 0
    out = capsys.readouterr().out
    assert "Total Amount of Samples: 0" in out
    assert "Decimation Upper Bound: 0" in out


def test_convert_counts_samples_and_writes_binary(tmp_path, capsys):
    values = [1, 2, 3]
    src = tmp_path / "in.data"
    src.write_text("".join(f"{v}\n" for v in values), encoding="utf-8")
    binary = tmp_path / "out.bin"
    status = main(["--convert", "--no-gui", "--input", str(src), "--binary", str(binary)])
    assert status == 0
    out = capsys.readouterr().out
    assert f"Total Amount of Samples: {len(values)}" in out
    assert binary.read_bytes() == b"".join(v.to_bytes(4, "little") for v in values)


def test_extract_writes_masked_bytes(tmp_path):
    values = [0x1234, 0xABCDEF]
    src = tmp_path / "in.data"
    src.write_text("".join(f"{v}\n" for v in values), encoding="utf-8")
    out_file = tmp_path / "masked.bin"
    status = main(
        ["--extract", "--no-gui", "--input", str(src), "--output", str(out_file),
         "--mask", "0000FF00"]
    )
    assert status == 0
    mask = parse_hex_mask("0000FF00")
    assert out_file.read_bytes() == b"".join(masked_bytes(v, mask) for v in values)


def test_missing_input_fails(tmp_path, capsys):
    status = main(
        ["--convert", "--no-gui", "--input", str(tmp_path / "absent.data"),
         "--binary", str(tmp_path / "out.bin")]
    )
    assert status == 1
    assert "Error" in capsys.readouterr().err


def test_bad_mask_fails(tmp_path):
    src = tmp_path / "in.data"
    src.write_text("1\n", encoding="utf-8")
    status = main(
        ["--extract", "--no-gui", "--input", str(src),
         "--output", str(tmp_path / "o.bin"), "--mask", "0" * 17]
    )
    assert status == 1