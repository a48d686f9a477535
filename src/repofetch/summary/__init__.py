from .models import RepositorySummary, SummaryOptions
from .service import SummaryService

__all__ = ["RepositorySummary", "SummaryOptions", "SummaryService"]
