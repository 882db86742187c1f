"""Data models for photo resizing."""
from .file_job import FileJob
from .naming_policy import NamingPolicy
from .directory_set import DirectorySet
from .resize_spec import ResizeSpec
from .program_options import ProgramOptions
from .plan_result import PlanResult

__all__ = ['FileJob', 'NamingPolicy', 'DirectorySet', 'ResizeSpec', 'ProgramOptions', 'PlanResult']
