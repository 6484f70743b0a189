from .cache import DirCache
from .processor import Processor
from .report import Outcome, Report, aggregate

__all__ = ["DirCache", "Processor", "Outcome", "Report", "aggregate"]
