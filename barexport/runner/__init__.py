"""Lifecycle drivers for the exporter."""

from barexport.runner.host import ExportRobot
from barexport.runner.replay import ReplayResult, run_replay

__all__ = ["ExportRobot", "ReplayResult", "run_replay"]
