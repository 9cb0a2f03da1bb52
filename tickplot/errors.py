class TickPlotError(Exception):

    def __init__(self, msg):
        super().__init__()
        self.msg = msg

    def __str__(self):
        return self.msg


class WrongUsage(TickPlotError):

    pass


class InvalidParameterName(WrongUsage):

    pass


class NoTickCandidate(TickPlotError):

    """No tick distribution with at least two ticks could be found for
    a calendar axis, or fewer than two explicitly given ticks lie inside
    the axis range.

    """

    def __init__(self, msg, start=None, end=None):
        super().__init__(msg)
        self.start = start
        self.end = end
