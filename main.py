import argparse
import configparser
import logging
import sys
from typing import Optional

from stepchart.ChartRegistry import load_chart
from stepchart.Config import Config
from stepchart.StepMania.StepManiaChart import StepManiaChart
from stepchart.utils.AudioUtils import get_audio_duration, resolve_audio_path
from stepchart.utils.Loggers import configure_console_logger

logger = logging.getLogger(__name__)


def describe_chart(chart: StepManiaChart, audio_duration: Optional[float] = None) -> str:
    lines = [
        f"Title:  {chart.title}",
        f"Artist: {chart.artist}",
        f"Music:  {chart.audio_file}",
        f"Length: {f'{audio_duration:.1f}s' if audio_duration is not None else 'unknown'}",
        f"Offset: {chart.offset / 1000.0}s",
        f"BPMs:   {', '.join(f'{change.beat}={change.bpm}' for change in chart.bpm_changes) or '-'}",
        f"Stops:  {', '.join(f'{stop.beat}={stop.duration}' for stop in chart.stops) or '-'}",
    ]
    for difficulty, track in chart.difficulties.items():
        lines.append(f"  {difficulty} ({track.dance_mode.label}, level {track.meter}): "
                     f"{len(track.measures)} measures, {track.row_count} rows")
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a StepMania .sm chart and optionally re-save it")
    parser.add_argument("input", help="Input chart file path")
    parser.add_argument("-o", "--output", help="Write the chart back out to this path")
    parser.add_argument("-c", "--config", help="Path to a config.ini (see config.example.ini)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    args = parser.parse_args(argv)

    encodings = None
    output_encoding = "utf-8"
    log_level = logging.INFO
    if args.config:
        try:
            config = Config(config_file_path=args.config)
        except (FileNotFoundError, ValueError, configparser.Error) as e:
            configure_console_logger()
            logger.error(f"Could not read config: {e}")
            return 1
        encodings = config.encodings
        output_encoding = config.output_encoding
        log_level = config.log_level
    configure_console_logger(logging.DEBUG if args.verbose else log_level)

    chart = load_chart(args.input, encodings=encodings)
    if chart is None:
        return 1

    audio_path = resolve_audio_path(args.input, chart.audio_file)
    audio_duration = get_audio_duration(audio_path) if audio_path else None
    print(describe_chart(chart, audio_duration=audio_duration))

    if args.output and not chart.save_to_file(args.output, encoding=output_encoding):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
