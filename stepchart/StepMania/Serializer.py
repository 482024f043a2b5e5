from typing import List, TYPE_CHECKING

from stepchart.StepMania.Models import DifficultyTrack

if TYPE_CHECKING:
    from stepchart.StepMania.StepManiaChart import StepManiaChart

INDENT = "     "


def format_number(value: float) -> str:
    # repr() is the shortest text that parses back to the same float
    return repr(float(value))


def format_tag(name: str, value: str) -> str:
    return f"#{name}:{value};\n"


def serialize_notes(track: DifficultyTrack) -> str:
    lines: List[str] = [
        "#NOTES:",
        f"{INDENT}{track.dance_mode.label}:",
        f"{INDENT}{track.charter}:",
        f"{INDENT}{track.difficulty}:",
        f"{INDENT}{track.meter}:",
        f"{INDENT}{','.join(format_number(value) for value in track.radar)}:",
    ]
    for measure in track.measures:
        lines.extend(f"{INDENT}{row}" for row in measure)
        # Rows after the last separator are dropped on load, so every measure gets one
        lines.append(f"{INDENT},")
    lines.append(";")
    return "\n".join(lines) + "\n"


def serialize_chart(chart: "StepManiaChart") -> str:
    """
    Renders a chart as .sm text. Tracks are written in difficulty label order,
    which is not necessarily the order they had in the loaded file.
    """
    parts = [
        format_tag("TITLE", chart.title),
        format_tag("ARTIST", chart.artist),
        format_tag("MUSIC", chart.audio_file),
        format_tag("OFFSET", format_number(chart.offset / 1000.0)),
        format_tag("BPMS", ",".join(f"{format_number(change.beat)}={format_number(change.bpm)}"
                                    for change in chart.bpm_changes)),
    ]
    if chart.stops:
        parts.append(format_tag("STOPS", ",".join(f"{format_number(stop.beat)}={format_number(stop.duration)}"
                                                  for stop in chart.stops)))

    for _, track in sorted(chart.difficulties.items()):
        parts.append(serialize_notes(track))

    return "".join(parts)
