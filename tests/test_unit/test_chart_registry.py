import pytest

from stepchart.Chart import ChartFormat
from stepchart.ChartRegistry import create_chart, detect_format, load_chart
from stepchart.Errors import UnsupportedChartFormatError
from stepchart.StepMania.StepManiaChart import StepManiaChart


def test_detect_format_by_extension():
    assert detect_format("songs/a/b.sm") is ChartFormat.STEPMANIA
    assert detect_format("B.SM") is ChartFormat.STEPMANIA


def test_detect_format_unknown_extension():
    with pytest.raises(UnsupportedChartFormatError):
        detect_format("chart.ssc")
    with pytest.raises(UnsupportedChartFormatError):
        detect_format("no_extension")


def test_create_chart():
    assert isinstance(create_chart(ChartFormat.STEPMANIA), StepManiaChart)


def test_load_chart(tmp_path):
    path = tmp_path / "song.sm"
    path.write_text("#TITLE:song;\n#BPMS:0=100;\n", encoding="utf-8")
    chart = load_chart(str(path))
    assert isinstance(chart, StepManiaChart)
    assert chart.title == "Song"
    assert chart.bpm == 100.0


def test_load_chart_failures(tmp_path):
    assert load_chart(str(tmp_path / "missing.sm")) is None
    other = tmp_path / "song.txt"
    other.write_text("#TITLE:x;", encoding="utf-8")
    assert load_chart(str(other)) is None
