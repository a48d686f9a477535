import asyncio
from pathlib import Path

from repofetch.exceptions import GitCommandError
from repofetch.logging import get_logger
from repofetch.summary.interfaces import RepositoryQueryGateway

logger = get_logger("git")


class AsyncSubprocessGitGateway(RepositoryQueryGateway):
    __slots__ = ("__git_timeout_sec", "__git_executable")

    def __init__(self, git_timeout_sec: float, git_executable: str = "git") -> None:
        self.__git_timeout_sec = git_timeout_sec
        self.__git_executable = git_executable

    async def is_bare_repository(self, path: Path) -> bool:
        output = await self.__run(["rev-parse", "--is-bare-repository"], cwd=path)
        return output.strip() == "true"

    async def work_tree(self, path: Path) -> Path:
        output = await self.__run(["rev-parse", "--show-toplevel"], cwd=path)
        top_level = output.strip()
        if not top_level:
            raise GitCommandError(["git", "rev-parse", "--show-toplevel"], 0, "no working tree")
        return Path(top_level)

    async def git_version(self) -> str:
        return await self.__run(["--version"])

    async def config_value(self, work_tree: Path, key: str) -> str:
        return await self.__run(["config", "--get", key], cwd=work_tree)

    async def config_entries(self, work_tree: Path) -> str:
        return await self.__run(["config", "--list"], cwd=work_tree)

    async def head_commit(self, work_tree: Path) -> str:
        return await self.__run(["rev-parse", "--verify", "HEAD"], cwd=work_tree)

    async def references(self, work_tree: Path) -> str:
        return await self.__run(["show-ref"], cwd=work_tree)

    async def log(self, work_tree: Path, no_merges: bool) -> str:
        args = ["log"]
        if no_merges:
            args.append("--no-merges")
        args.append("--pretty=format:%cr%x09%an")
        return await self.__run(args, cwd=work_tree)

    async def describe_tags(self, work_tree: Path) -> str:
        return await self.__run(["describe", "--abbrev=0", "--tags"], cwd=work_tree)

    async def status(self, work_tree: Path) -> str:
        return await self.__run(["status", "--porcelain"], cwd=work_tree)

    async def count_objects(self, work_tree: Path) -> str:
        return await self.__run(["count-objects", "-vH"], cwd=work_tree)

    async def ls_files(self, work_tree: Path) -> str:
        return await self.__run(["ls-files"], cwd=work_tree)

    async def last_change(self, work_tree: Path) -> str:
        return await self.__run(["log", "-1", "--format=%cr"], cwd=work_tree)

    async def __run(self, args: list[str], cwd: Path | None = None) -> str:
        command = [self.__git_executable, *args]
        logger.debug("running %s in %s", " ".join(command), cwd or ".")
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(cwd) if cwd else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise GitCommandError(command, None, str(exc)) from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.__git_timeout_sec)
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise GitCommandError(
                command, None, f"timeout after {self.__git_timeout_sec}s"
            ) from exc

        if process.returncode != 0:
            raise GitCommandError(command, process.returncode, stderr.decode("utf-8", errors="replace"))

        return stdout.decode("utf-8", errors="replace")
