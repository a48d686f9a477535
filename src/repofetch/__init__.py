"""repofetch public package API."""

from .client import RepofetchClient
from .exceptions import RepofetchError
from .language import Language
from .settings import RepofetchSettings
from .summary.models import AuthorStat, CommitInfo, InfoFields, LanguageStat, RepositorySummary

__version__ = "0.1.0"

__all__ = [
    "AuthorStat",
    "CommitInfo",
    "InfoFields",
    "Language",
    "LanguageStat",
    "RepofetchClient",
    "RepofetchError",
    "RepofetchSettings",
    "RepositorySummary",
]
