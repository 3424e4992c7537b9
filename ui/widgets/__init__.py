from ui.widgets.stopwatch_view import StopWatchView

__all__ = ["StopWatchView"]
