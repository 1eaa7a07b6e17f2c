from collections import Counter
from pathlib import Path

import pandas as pd
import pytest

from flowlog_tagger.core.models import FlowCounts, PortProtocol
from flowlog_tagger.exceptions import ReportGenerationError
from flowlog_tagger.reporting import (
    generate_reports,
    port_protocol_counts_frame,
    tag_counts_frame,
    write_port_protocol_counts_report,
    write_tag_counts_report,
)


@pytest.fixture
def counts() -> FlowCounts:
    return FlowCounts(
        tag_counts=Counter({"sv_P2": 1, "Untagged": 8, "email": 3, "sv_P1": 3}),
        port_protocol_counts=Counter(
            {
                PortProtocol("993", "tcp"): 1,
                PortProtocol("22", "tcp"): 1,
                PortProtocol("68", "udp"): 4,
            }
        ),
    )


def test_tag_counts_frame_ordering(counts):
    df = tag_counts_frame(counts.tag_counts)
    assert list(df.columns) == ["tag", "count"]
    assert df["tag"].tolist() == ["Untagged", "email", "sv_P1", "sv_P2"]
    assert df["count"].tolist() == [8, 3, 3, 1]


def test_port_protocol_counts_frame_ordering(counts):
    df = port_protocol_counts_frame(counts.port_protocol_counts)
    expected = pd.DataFrame(
        {"port": ["68", "22", "993"], "protocol": ["udp", "tcp", "tcp"], "count": [4, 1, 1]}
    )
    pd.testing.assert_frame_equal(df, expected, check_dtype=False)


def test_empty_frames_keep_columns():
    assert list(tag_counts_frame({}).columns) == ["tag", "count"]
    assert list(port_protocol_counts_frame({}).columns) == ["port", "protocol", "count"]


def test_tag_counts_report_layout(tmp_path: Path, counts):
    path = write_tag_counts_report(tmp_path / "tags.txt", counts.tag_counts)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Tag Counts:",
        "",
        "Tag\t\tCount",
        "Untagged\t\t8",
        "email\t\t3",
        "sv_P1\t\t3",
        "sv_P2\t\t1",
    ]


def test_port_protocol_report_layout(tmp_path: Path, counts):
    path = write_port_protocol_counts_report(
        tmp_path / "pp.txt", counts.port_protocol_counts
    )
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Port/Protocol Combination Counts:",
        "",
        "Port\tProtocol\tCount",
        "68\tudp\t\t4",
        "22\ttcp\t\t1",
        "993\ttcp\t\t1",
    ]


def test_empty_reports_have_headers_only(tmp_path: Path):
    paths = generate_reports(FlowCounts(), tmp_path)
    assert [p.name for p in paths] == ["tag_counts.txt", "port_protocol_counts.txt"]
    assert paths[0].read_text(encoding="utf-8") == "Tag Counts:\n\nTag\t\tCount\n"


def test_generate_reports_creates_directory_and_csv(tmp_path: Path, counts):
    out = tmp_path / "reports" / "run1"
    paths = generate_reports(counts, out, export_csv=True)
    assert [p.name for p in paths] == [
        "tag_counts.txt",
        "port_protocol_counts.txt",
        "tag_counts.csv",
        "port_protocol_counts.csv",
    ]
    assert all(p.exists() for p in paths)
    tag_csv = pd.read_csv(out / "tag_counts.csv")
    assert tag_csv.iloc[0].tolist() == ["Untagged", 8]


def test_generate_reports_custom_names(tmp_path: Path, counts):
    paths = generate_reports(
        counts, tmp_path, tag_filename="a.txt", port_protocol_filename="b.txt"
    )
    assert [p.name for p in paths] == ["a.txt", "b.txt"]


def test_unwritable_report_raises(tmp_path: Path, counts):
    target = tmp_path / "is_a_dir"
    target.mkdir()
    with pytest.raises(ReportGenerationError) as excinfo:
        write_tag_counts_report(target, counts.tag_counts)
    assert str(target) in str(excinfo.value)


def test_output_dir_that_is_a_file_raises(tmp_path: Path, counts):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(ReportGenerationError, match="output directory"):
        generate_reports(counts, blocker)
