from pathlib import Path

import pytest

from flowlog_tagger.__main__ import COMPLETION_MESSAGE, MISSING_INPUTS_MESSAGE, main


@pytest.mark.parametrize("argv", [[], ["lookup.csv"], ["lookup.csv", "flow.log"]])
def test_missing_inputs_prints_usage(argv, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(argv) == 0
    out, err = capsys.readouterr()
    assert MISSING_INPUTS_MESSAGE in err
    assert "Usage:" in out
    assert not (tmp_path / "tag_counts.txt").exists()


def test_successful_run(capsys, tmp_path: Path, lookup_file, flow_log_file, protocol_file):
    code = main(
        [
            str(lookup_file),
            str(flow_log_file),
            str(protocol_file),
            "--output-dir",
            str(tmp_path),
            "--csv",
        ]
    )
    out, _ = capsys.readouterr()
    assert code == 0
    assert "Output files generated successfully." in out
    assert COMPLETION_MESSAGE in out
    assert (tmp_path / "tag_counts.txt").exists()
    assert (tmp_path / "port_protocol_counts.txt").exists()
    assert (tmp_path / "tag_counts.csv").exists()


def test_defaults_to_working_directory(capsys, tmp_path, monkeypatch, lookup_file, flow_log_file, protocol_file):
    monkeypatch.chdir(tmp_path)
    assert main([str(lookup_file), str(flow_log_file), str(protocol_file)]) == 0
    assert (tmp_path / "tag_counts.txt").exists()
    assert not (tmp_path / "tag_counts.csv").exists()


def test_missing_file_reports_error(capsys, tmp_path: Path, lookup_file, protocol_file):
    missing = tmp_path / "missing.log"
    code = main([str(lookup_file), str(missing), str(protocol_file), "--output-dir", str(tmp_path)])
    _, err = capsys.readouterr()
    assert code == 1
    assert "An error occurred: Failed to process flow log from" in err
    assert str(missing) in err


def test_config_file_is_applied(capsys, tmp_path: Path, lookup_file, flow_log_file, protocol_file):
    out_dir = tmp_path / "from_config"
    config = tmp_path / "settings.yaml"
    config.write_text(
        f"output_dir: {out_dir}\ntag_counts_filename: tags.txt\nlog_level: warning\n",
        encoding="utf-8",
    )
    code = main([str(lookup_file), str(flow_log_file), str(protocol_file), "--config", str(config)])
    assert code == 0
    assert (out_dir / "tags.txt").exists()


def test_bad_log_level_is_reported(capsys, tmp_path: Path, lookup_file, flow_log_file, protocol_file):
    code = main(
        [str(lookup_file), str(flow_log_file), str(protocol_file), "--log-level", "chatty"]
    )
    _, err = capsys.readouterr()
    assert code == 1
    assert "Unknown log level" in err
