from pydantic import BaseModel, ConfigDict, Field

from repofetch.language import Language

UNKNOWN = "??"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class CommitRecord(_Record):
    time: str
    author: str


class CommitInfo(_Record):
    commit_id: str
    refs: tuple[str, ...] = ()

    def __str__(self) -> str:
        short_id = self.commit_id[:7]
        if not self.refs:
            return short_id
        return f"{short_id} ({', '.join(self.refs)})"


class RemoteConfiguration(_Record):
    repository_name: str
    repository_url: str


class LanguageStat(_Record):
    language: Language
    percentage: float = Field(ge=0.0, le=100.0)


class AuthorStat(_Record):
    name: str
    commits: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)


class SummaryOptions(_Record):
    no_merges: bool = False
    authors_count: int = Field(default=3, ge=0)
    ignored_paths: tuple[str, ...] = ()


class InfoFields(_Record):
    """Fields switched off in the rendered summary; True means hidden."""

    git_info: bool = False
    project: bool = False
    head: bool = False
    pending: bool = False
    version: bool = False
    created: bool = False
    languages: bool = False
    authors: bool = False
    last_change: bool = False
    repo: bool = False
    commits: bool = False
    lines_of_code: bool = False
    size: bool = False
    license: bool = False

    @classmethod
    def disabled(cls, names: "list[str] | tuple[str, ...]") -> "InfoFields":
        """Build from CLI-style names such as ``last-change``; unknown names raise ValueError."""
        flags: dict[str, bool] = {}
        for name in names:
            key = name.strip().lower().replace("-", "_")
            if key not in cls.model_fields:
                raise ValueError(f"unknown info field: {name}")
            flags[key] = True
        return cls(**flags)


class DisplayConfig(_Record):
    ascii_language: Language | None = None
    ascii_colors: tuple[str, ...] = ()
    disabled_fields: InfoFields = InfoFields()
    bold: bool = True
    no_color_blocks: bool = False


class RepositorySummary(_Record):
    git_version: str
    git_username: str
    project_name: str
    current_commit: CommitInfo
    version: str
    creation_date: str
    languages: tuple[LanguageStat, ...]
    authors: tuple[AuthorStat, ...]
    last_change: str
    repository_url: str
    commits: str
    pending: str
    repo_size: str
    number_of_lines: int
    license: str
    display: DisplayConfig = DisplayConfig()

    @property
    def dominant_language(self) -> Language:
        if not self.languages:
            return Language.UNKNOWN
        return self.languages[0].language

    @property
    def logo_language(self) -> Language:
        if self.display.ascii_language is None or self.display.ascii_language is Language.UNKNOWN:
            return self.dominant_language
        return self.display.ascii_language
