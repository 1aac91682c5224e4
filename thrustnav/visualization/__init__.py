# thrustnav/visualization/__init__.py

from .observers import EfficientObserver, ExperimentObserver, DebugObserver
from .plotter import ScenePlotter

__all__ = ["EfficientObserver", "ExperimentObserver", "DebugObserver", "ScenePlotter"]
