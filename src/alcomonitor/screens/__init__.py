"""Screens for the monitor app."""

from alcomonitor.screens.monitor import MonitorScreen

__all__ = ["MonitorScreen"]
