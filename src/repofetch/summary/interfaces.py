from pathlib import Path
from typing import Protocol

from repofetch.language import Language


class RepositoryQueryGateway(Protocol):
    async def is_bare_repository(self, path: Path) -> bool:
        ...

    async def work_tree(self, path: Path) -> Path:
        ...

    async def git_version(self) -> str:
        ...

    async def config_value(self, work_tree: Path, key: str) -> str:
        ...

    async def config_entries(self, work_tree: Path) -> str:
        ...

    async def head_commit(self, work_tree: Path) -> str:
        ...

    async def references(self, work_tree: Path) -> str:
        ...

    async def log(self, work_tree: Path, no_merges: bool) -> str:
        ...

    async def describe_tags(self, work_tree: Path) -> str:
        ...

    async def status(self, work_tree: Path) -> str:
        ...

    async def count_objects(self, work_tree: Path) -> str:
        ...

    async def ls_files(self, work_tree: Path) -> str:
        ...

    async def last_change(self, work_tree: Path) -> str:
        ...


class LanguageCounter(Protocol):
    def count(self, directory: Path, ignored_paths: list[str]) -> dict[Language, int]:
        ...


class LicenseClassifier(Protocol):
    def classify(self, text: str) -> str | None:
        ...
