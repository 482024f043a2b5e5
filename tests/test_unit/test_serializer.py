from stepchart.StepMania.Models import BpmChange, DanceMode, DifficultyTrack, Stop
from stepchart.StepMania.Serializer import format_number, serialize_chart, serialize_notes
from stepchart.StepMania.StepManiaChart import StepManiaChart


def test_format_number():
    assert format_number(0.5) == "0.5"
    assert format_number(120) == "120.0"
    assert format_number(0.1) == "0.1"


def test_header_tags_in_fixed_order():
    chart = StepManiaChart()
    chart.title = "Song"
    chart.artist = "Band"
    chart.audio_file = "song.ogg"
    chart.offset = 500.0
    chart.bpm_changes = [BpmChange(0.0, 120.0), BpmChange(64.0, 180.0)]

    assert serialize_chart(chart) == (
        "#TITLE:Song;\n"
        "#ARTIST:Band;\n"
        "#MUSIC:song.ogg;\n"
        "#OFFSET:0.5;\n"
        "#BPMS:0.0=120.0,64.0=180.0;\n"
    )


def test_stops_only_written_when_present():
    chart = StepManiaChart()
    assert "#STOPS" not in serialize_chart(chart)

    chart.stops = [Stop(8.0, 0.25), Stop(2.0, 1.0)]
    assert "#STOPS:8.0=0.25,2.0=1.0;\n" in serialize_chart(chart)


def test_notes_block_layout():
    track = DifficultyTrack("Easy", charter="X", meter=3, measures=[["1000", "0100"], ["0000"]])
    assert serialize_notes(track) == (
        "#NOTES:\n"
        "     dance-single:\n"
        "     X:\n"
        "     Easy:\n"
        "     3:\n"
        "     0.0,0.0,0.0,0.0,0.0:\n"
        "     1000\n"
        "     0100\n"
        "     ,\n"
        "     0000\n"
        "     ,\n"
        ";\n"
    )


def test_double_mode_label():
    track = DifficultyTrack("Hard", dance_mode=DanceMode.DOUBLE, meter=10)
    assert "     dance-double:\n" in serialize_notes(track)


def test_known_quirk_tracks_written_in_label_order():
    text = ""
    for difficulty in ("Medium", "Beginner", "Hard"):
        text += (f"#NOTES:\ndance-single:\nX:\n{difficulty}:\n1:\n0,0,0,0,0:\n0000\n,\n;\n")
    output = StepManiaChart.loads(text).dumps()
    positions = [output.index(f"     {difficulty}:") for difficulty in ("Beginner", "Hard", "Medium")]
    assert positions == sorted(positions)


def test_no_empty_measures_after_reserializing_consecutive_separators():
    text = ("#TITLE:x;\n#NOTES:\ndance-single:\nX:\nEasy:\n3:\n0,0,0,0,0:\n"
            "1000\n,\n,\n0100\n,\n;\n")
    output = StepManiaChart.loads(text).dumps()
    assert ",\n     ,\n" not in output
    assert output.count("     ,\n") == 2
