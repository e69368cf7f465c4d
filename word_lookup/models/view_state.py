"""View states and the panels that display them."""

from enum import Enum


class Panel(Enum):
    """The mutually exclusive panels of the lookup window."""

    RESULT = "result"
    LOADING = "loading"
    ERROR = "error"


class ViewState(Enum):
    """State owned by the view state controller."""

    DEFAULT = "default"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"

    @property
    def panel(self) -> Panel:
        """The single panel visible in this state."""
        return {
            ViewState.DEFAULT: Panel.RESULT,
            ViewState.LOADING: Panel.LOADING,
            ViewState.RESULT: Panel.RESULT,
            ViewState.ERROR: Panel.ERROR,
        }[self]
