class WidgetError(Exception):
    """Base for every error the widget core raises on purpose."""


class OutOfRange(WidgetError, IndexError):
    def __init__(self, position: int, total: int):
        self.position = position
        self.total = total
        super().__init__(f"exercise position {position} out of range (0..{total - 1})")


class InvalidArgument(WidgetError, ValueError):
    pass


class PlanNotLoaded(WidgetError):
    def __init__(self):
        super().__init__("plan has not been delivered yet")
