import asyncio
from pathlib import Path
from typing import Any

from repofetch.integrations.git.subprocess_gateway import AsyncSubprocessGitGateway
from repofetch.integrations.languages.line_counter import ExtensionLineCounter
from repofetch.integrations.license.keyword_classifier import KeywordLicenseClassifier
from repofetch.render.renderer import ImageBackend, SummaryRenderer
from repofetch.settings import RepofetchSettings
from repofetch.summary.models import RepositorySummary
from repofetch.summary.service import SummaryService


class RepofetchClient:
    __slots__ = ("__settings", "__summary_service", "__renderer")

    def __init__(
        self,
        settings: RepofetchSettings | None = None,
        summary_service: SummaryService | None = None,
        image: Any = None,
        image_backend: ImageBackend | None = None,
    ) -> None:
        self.__settings = settings or RepofetchSettings()
        self.__renderer = SummaryRenderer(image=image, image_backend=image_backend)

        if summary_service is not None:
            self.__summary_service = summary_service
            return

        self.__summary_service = SummaryService(
            gateway=AsyncSubprocessGitGateway(git_timeout_sec=self.__settings.git_timeout_sec),
            language_counter=ExtensionLineCounter(git_timeout_sec=self.__settings.git_timeout_sec),
            license_classifier=KeywordLicenseClassifier(),
        )

    @property
    def settings(self) -> RepofetchSettings:
        return self.__settings

    @property
    def summary_service(self) -> SummaryService:
        return self.__summary_service

    async def summarize_async(self, path: Path | str = ".") -> RepositorySummary:
        return await self.__summary_service.summarize(
            Path(path),
            options=self.__settings.summary_options(),
            display=self.__settings.display_config(),
        )

    def summarize(self, path: Path | str = ".") -> RepositorySummary:
        return asyncio.run(self.summarize_async(path))

    def render(self, summary: RepositorySummary) -> str:
        return self.__renderer.render(summary)

    def fetch(self, path: Path | str = ".") -> str:
        return self.render(self.summarize(path))
