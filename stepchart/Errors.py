class ChartError(Exception):
    pass


class ChartParseError(ChartError):
    def __init__(self, tag: str, token: str, reason: str = "not a number"):
        """
        :param tag: The tag whose body could not be parsed, eg "BPMS"
        :param token: The offending piece of the tag body
        :param reason: Short description of what went wrong
        """
        self.tag = tag
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid value {token!r} in #{tag}: {reason}")


class UnsupportedChartFormatError(ChartError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No chart format registered for {path}")
