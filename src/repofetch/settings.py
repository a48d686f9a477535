from pydantic import BaseModel, ConfigDict, Field

from repofetch.language import Language
from repofetch.summary.models import DisplayConfig, InfoFields, SummaryOptions


class RepofetchSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    git_timeout_sec: float = Field(default=30.0, gt=0)
    no_merges: bool = False
    authors_count: int = Field(default=3, ge=0)
    ignored_paths: tuple[str, ...] = ()
    ascii_language: Language | None = None
    ascii_colors: tuple[str, ...] = ()
    disabled_fields: InfoFields = InfoFields()
    bold: bool = True
    no_color_blocks: bool = False

    def summary_options(self) -> SummaryOptions:
        return SummaryOptions(
            no_merges=self.no_merges,
            authors_count=self.authors_count,
            ignored_paths=self.ignored_paths,
        )

    def display_config(self) -> DisplayConfig:
        return DisplayConfig(
            ascii_language=self.ascii_language,
            ascii_colors=self.ascii_colors,
            disabled_fields=self.disabled_fields,
            bold=self.bold,
            no_color_blocks=self.no_color_blocks,
        )
