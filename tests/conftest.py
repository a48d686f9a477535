from pathlib import Path

import pytest

from repofetch.exceptions import GitCommandError
from repofetch.language import Language

HEAD = "3f2c1a9d8e7b6c5a4f3e2d1c0b9a8f7e6d5c4b3a"

DEFAULT_RESPONSES: dict[str, str] = {
    "is_bare_repository": "false",
    "git_version": "git version 2.43.0\n",
    "config_value": "Jane Doe\n",
    "config_entries": "core.bare=false\nremote.origin.url=https://github.com/acme/rocket.git\n",
    "head_commit": f"{HEAD}\n",
    "references": (
        f"{HEAD} refs/heads/main\n"
        f"{HEAD} refs/remotes/origin/HEAD\n"
        f"{HEAD} refs/remotes/origin/main\n"
        "0000000000000000000000000000000000000000 refs/heads/feature\n"
        f"{HEAD} refs/tags/v1.2.0\n"
    ),
    "log": "2 hours ago\tJane Doe\n3 days ago\tJohn Roe\n2 weeks ago\t'Jane Doe'\n5 months ago\tAda\n",
    "describe_tags": "v1.2.0\n",
    "status": "M  a.txt\n?? b.txt\nD  c.txt\n",
    "count_objects": "count: 0\nsize: 0\nin-pack: 42\npacks: 1\nsize-pack: 1.20 MiB\nprune-packable: 0\n",
    "ls_files": "a.txt\nsrc/main.py\nREADME.md\n",
    "last_change": "2 hours ago\n",
}


class FakeGateway:
    """Scripted gateway: ``responses`` maps method names to output, or to an exception to raise."""

    def __init__(self, responses: dict[str, object] | None = None, work_tree: Path = Path("/work/rocket")) -> None:
        self.responses: dict[str, object] = {**DEFAULT_RESPONSES, **(responses or {})}
        self.work_tree_path = work_tree
        self.calls: list[str] = []

    def _answer(self, name: str) -> str:
        self.calls.append(name)
        answer = self.responses[name]
        if isinstance(answer, BaseException):
            raise answer
        return str(answer)

    async def is_bare_repository(self, path: Path) -> bool:
        return self._answer("is_bare_repository") == "true"

    async def work_tree(self, path: Path) -> Path:
        self.calls.append("work_tree")
        answer = self.responses.get("work_tree")
        if isinstance(answer, BaseException):
            raise answer
        return self.work_tree_path

    async def git_version(self) -> str:
        return self._answer("git_version")

    async def config_value(self, work_tree: Path, key: str) -> str:
        return self._answer("config_value")

    async def config_entries(self, work_tree: Path) -> str:
        return self._answer("config_entries")

    async def head_commit(self, work_tree: Path) -> str:
        return self._answer("head_commit")

    async def references(self, work_tree: Path) -> str:
        return self._answer("references")

    async def log(self, work_tree: Path, no_merges: bool) -> str:
        return self._answer("log")

    async def describe_tags(self, work_tree: Path) -> str:
        return self._answer("describe_tags")

    async def status(self, work_tree: Path) -> str:
        return self._answer("status")

    async def count_objects(self, work_tree: Path) -> str:
        return self._answer("count_objects")

    async def ls_files(self, work_tree: Path) -> str:
        return self._answer("ls_files")

    async def last_change(self, work_tree: Path) -> str:
        return self._answer("last_change")


class FakeLanguageCounter:
    def __init__(self, counts: dict[Language, int] | None = None) -> None:
        self.counts = counts if counts is not None else {Language.PYTHON: 750, Language.SHELL: 250}
        self.calls: list[tuple[Path, list[str]]] = []

    def count(self, directory: Path, ignored_paths: list[str]) -> dict[Language, int]:
        self.calls.append((directory, ignored_paths))
        return dict(self.counts)


class FakeLicenseClassifier:
    def __init__(self, result: str | None = "MIT") -> None:
        self.result = result
        self.texts: list[str] = []

    def classify(self, text: str) -> str | None:
        self.texts.append(text)
        return self.result


def git_failure(*args: str) -> GitCommandError:
    return GitCommandError(["git", *args], 128, "fatal: simulated failure")


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def language_counter() -> FakeLanguageCounter:
    return FakeLanguageCounter()
