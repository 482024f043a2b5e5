import logging
import os
from typing import Dict, List, Optional, Type

from stepchart.Chart import Chart, ChartFormat
from stepchart.Errors import UnsupportedChartFormatError
from stepchart.StepMania.StepManiaChart import StepManiaChart

logger = logging.getLogger(__name__)

CHART_CLASSES: Dict[ChartFormat, Type[Chart]] = {
    ChartFormat.STEPMANIA: StepManiaChart,
}

EXTENSION_FORMATS: Dict[str, ChartFormat] = {
    ".sm": ChartFormat.STEPMANIA,
}


def detect_format(path: str) -> ChartFormat:
    extension = os.path.splitext(path)[1].lower()
    try:
        return EXTENSION_FORMATS[extension]
    except KeyError:
        raise UnsupportedChartFormatError(path) from None


def create_chart(chart_format: ChartFormat) -> Chart:
    return CHART_CLASSES[chart_format]()


def load_chart(path: str, encodings: Optional[List[str]] = None) -> Optional[Chart]:
    """
    Picks the chart class from the file extension and loads the file with it.

    :return: The loaded chart, or None if the format is unknown or loading failed
    """
    try:
        chart = create_chart(detect_format(path))
    except UnsupportedChartFormatError as e:
        logger.error(str(e))
        return None

    if not chart.load_from_file(path, encodings=encodings):
        return None
    return chart
