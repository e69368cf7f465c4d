"""Controllers coordinating services and the view."""

from .lookup_controller import LookupController, SynchronousLookupRunner
from .view_state_controller import ViewStateController

__all__ = ["LookupController", "SynchronousLookupRunner", "ViewStateController"]
