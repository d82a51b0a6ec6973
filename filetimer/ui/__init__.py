"""UI components."""
from .tray import TrayApp
from .panel import TimesPanel
from .chart import TopFilesChart
from .config_dialog import ConfigDialog

__all__ = ['TrayApp', 'TimesPanel', 'TopFilesChart', 'ConfigDialog']
