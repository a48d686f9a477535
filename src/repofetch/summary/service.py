import asyncio
import time
from collections.abc import Awaitable
from pathlib import Path
from typing import Any, NamedTuple

from repofetch.exceptions import (
    BareRepositoryError,
    ConfigurationUnavailableError,
    GitCommandError,
    NoSourceCodeFoundError,
    NotARepositoryError,
    ReferenceResolutionError,
    RepofetchError,
)
from repofetch.logging import get_logger

from . import reducers
from .interfaces import LanguageCounter, LicenseClassifier, RepositoryQueryGateway
from .license import detect_project_license
from .models import (
    UNKNOWN,
    CommitInfo,
    CommitRecord,
    DisplayConfig,
    LanguageStat,
    RemoteConfiguration,
    RepositorySummary,
    SummaryOptions,
)

logger = get_logger("probes")


class _Probe(NamedTuple):
    name: str
    work: Awaitable[Any]
    sentinel: Any


class SummaryService:
    """Fans out one probe per repository fact and assembles the summary.

    The two critical checks (is this a repository, does it have a work tree)
    run first and abort before any probe starts. Every other probe runs
    concurrently and is always awaited; afterwards fatal failures are raised
    in probe order and the remaining failures turn into sentinel values.
    """

    __slots__ = ("__gateway", "__language_counter", "__license_classifier")

    def __init__(
        self,
        gateway: RepositoryQueryGateway,
        language_counter: LanguageCounter,
        license_classifier: LicenseClassifier,
    ) -> None:
        self.__gateway = gateway
        self.__language_counter = language_counter
        self.__license_classifier = license_classifier

    async def summarize(
        self,
        path: Path,
        options: SummaryOptions | None = None,
        display: DisplayConfig | None = None,
    ) -> RepositorySummary:
        options = options or SummaryOptions()
        display = display or DisplayConfig()
        work_tree = await self.__resolve_work_tree(path)

        probes = (
            _Probe("remote", self.__remote_configuration(work_tree), None),
            _Probe("head", self.__current_commit(work_tree), None),
            _Probe("languages", self.__languages(work_tree, options.ignored_paths), None),
            _Probe("git_version", self.__git_version(), UNKNOWN),
            _Probe("username", self.__username(work_tree), ""),
            _Probe("version", self.__version(work_tree), UNKNOWN),
            _Probe("history", self.__history(work_tree, options.no_merges), ()),
            _Probe("pending", self.__pending(work_tree), ""),
            _Probe("size", self.__repo_size(work_tree), UNKNOWN),
            _Probe("last_change", self.__last_change(work_tree), UNKNOWN),
            _Probe("license", self.__license(work_tree), UNKNOWN),
        )
        results = await asyncio.gather(
            *(self.__timed(probe.name, probe.work) for probe in probes),
            return_exceptions=True,
        )
        values = {probe.name: self.__settle(probe, result) for probe, result in zip(probes, results)}

        remote: RemoteConfiguration = values["remote"]
        history: tuple[CommitRecord, ...] = values["history"]
        languages: tuple[LanguageStat, ...]
        languages, number_of_lines = values["languages"]

        return RepositorySummary(
            git_version=values["git_version"],
            git_username=values["username"],
            project_name=remote.repository_name,
            current_commit=values["head"],
            version=values["version"],
            creation_date=reducers.creation_date(history),
            languages=languages,
            authors=reducers.rank_authors(history, options.authors_count),
            last_change=values["last_change"],
            repository_url=remote.repository_url,
            commits=reducers.count_commits(history),
            pending=values["pending"],
            repo_size=values["size"],
            number_of_lines=number_of_lines,
            license=values["license"],
            display=display,
        )

    async def __resolve_work_tree(self, path: Path) -> Path:
        try:
            bare = await self.__gateway.is_bare_repository(path)
        except GitCommandError as exc:
            raise NotARepositoryError(path) from exc
        if bare:
            raise BareRepositoryError(path)

        try:
            return await self.__gateway.work_tree(path)
        except GitCommandError as exc:
            raise BareRepositoryError(path) from exc

    @staticmethod
    async def __timed(name: str, work: Awaitable[Any]) -> Any:
        started = time.perf_counter()
        try:
            return await work
        finally:
            logger.debug("%s finished in %.3fs", name, time.perf_counter() - started)

    @staticmethod
    def __settle(probe: _Probe, result: Any) -> Any:
        if isinstance(result, RepofetchError):
            if result.fatal:
                raise result
            logger.info("%s unavailable: %s", probe.name, result.message)
            return probe.sentinel
        if isinstance(result, OSError):
            logger.info("%s unavailable: %s", probe.name, result)
            return probe.sentinel
        if isinstance(result, BaseException):
            raise result
        return result

    async def __remote_configuration(self, work_tree: Path) -> RemoteConfiguration:
        try:
            entries = await self.__gateway.config_entries(work_tree)
        except GitCommandError as exc:
            raise ConfigurationUnavailableError(exc.message) from exc
        return reducers.parse_remote_configuration(entries, fallback_name=work_tree.name)

    async def __current_commit(self, work_tree: Path) -> CommitInfo:
        try:
            head = (await self.__gateway.head_commit(work_tree)).strip()
            references = await self.__gateway.references(work_tree)
        except GitCommandError as exc:
            raise ReferenceResolutionError(exc.message) from exc
        if not head:
            raise ReferenceResolutionError()
        return CommitInfo(commit_id=head, refs=reducers.parse_references(references, head))

    async def __languages(
        self, work_tree: Path, ignored_paths: tuple[str, ...]
    ) -> tuple[tuple[LanguageStat, ...], int]:
        patterns = reducers.rewrite_ignored_paths(ignored_paths)
        try:
            counts = await asyncio.to_thread(self.__language_counter.count, work_tree, patterns)
        except OSError as exc:
            raise NoSourceCodeFoundError(work_tree) from exc
        return reducers.compute_language_stats(counts, str(work_tree)), reducers.total_lines(counts)

    async def __git_version(self) -> str:
        return reducers.first_line(await self.__gateway.git_version())

    async def __username(self, work_tree: Path) -> str:
        return (await self.__gateway.config_value(work_tree, "user.name")).strip()

    async def __version(self, work_tree: Path) -> str:
        return reducers.first_line(await self.__gateway.describe_tags(work_tree))

    async def __history(self, work_tree: Path, no_merges: bool) -> tuple[CommitRecord, ...]:
        return reducers.parse_history(await self.__gateway.log(work_tree, no_merges))

    async def __pending(self, work_tree: Path) -> str:
        return reducers.summarize_pending(await self.__gateway.status(work_tree))

    async def __repo_size(self, work_tree: Path) -> str:
        count_objects = await self.__gateway.count_objects(work_tree)
        try:
            tracked_files: str | None = await self.__gateway.ls_files(work_tree)
        except GitCommandError:
            tracked_files = None
        return reducers.format_repo_size(count_objects, tracked_files)

    async def __last_change(self, work_tree: Path) -> str:
        return reducers.first_line(await self.__gateway.last_change(work_tree))

    async def __license(self, work_tree: Path) -> str:
        return await asyncio.to_thread(detect_project_license, work_tree, self.__license_classifier)
