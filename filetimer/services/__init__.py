"""Business logic services."""
from .tracker_service import TrackerController, TrackerRules, handle
from .presentation_service import PresentationService, FileRow, HeaderRow, format_duration
from .command_service import CommandService
from .chart_service import top_files

__all__ = [
    'TrackerController', 'TrackerRules', 'handle',
    'PresentationService', 'FileRow', 'HeaderRow', 'format_duration',
    'CommandService', 'top_files',
]
