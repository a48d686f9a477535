import os
import subprocess
from collections import defaultdict
from collections.abc import Callable, Iterator
from fnmatch import fnmatchcase
from pathlib import Path

from repofetch.language import Language
from repofetch.logging import get_logger
from repofetch.summary.interfaces import LanguageCounter

logger = get_logger("languages")

_HASH = ("#",)
_SLASHES = ("//",)
_DASHES = ("--",)
_SEMICOLON = (";",)
_PERCENT = ("%",)

# extension (or exact file name) -> (language, line comment prefixes)
EXTENSIONS: dict[str, tuple[Language, tuple[str, ...]]] = {
    ".asm": (Language.ASSEMBLY, _SEMICOLON),
    ".s": (Language.ASSEMBLY, _SEMICOLON),
    ".c": (Language.C, _SLASHES),
    ".h": (Language.C, _SLASHES),
    ".clj": (Language.CLOJURE, _SEMICOLON),
    ".cljs": (Language.CLOJURE, _SEMICOLON),
    ".cmake": (Language.CMAKE, _HASH),
    "CMakeLists.txt": (Language.CMAKE, _HASH),
    ".coffee": (Language.COFFEESCRIPT, _HASH),
    ".cc": (Language.CPP, _SLASHES),
    ".cpp": (Language.CPP, _SLASHES),
    ".cxx": (Language.CPP, _SLASHES),
    ".hpp": (Language.CPP, _SLASHES),
    ".hh": (Language.CPP, _SLASHES),
    ".cs": (Language.CSHARP, _SLASHES),
    ".css": (Language.CSS, ()),
    ".d": (Language.D, _SLASHES),
    ".dart": (Language.DART, _SLASHES),
    "Dockerfile": (Language.DOCKERFILE, _HASH),
    ".el": (Language.ELISP, _SEMICOLON),
    ".ex": (Language.ELIXIR, _HASH),
    ".exs": (Language.ELIXIR, _HASH),
    ".elm": (Language.ELM, _DASHES),
    ".erl": (Language.ERLANG, _PERCENT),
    ".hrl": (Language.ERLANG, _PERCENT),
    ".fish": (Language.FISH, _HASH),
    ".fs": (Language.FSHARP, _SLASHES),
    ".fsi": (Language.FSHARP, _SLASHES),
    ".fth": (Language.FORTH, ("\\",)),
    ".4th": (Language.FORTH, ("\\",)),
    ".f90": (Language.FORTRAN, ("!",)),
    ".f95": (Language.FORTRAN, ("!",)),
    ".f03": (Language.FORTRAN, ("!",)),
    ".go": (Language.GO, _SLASHES),
    ".groovy": (Language.GROOVY, _SLASHES),
    ".gradle": (Language.GROOVY, _SLASHES),
    ".hs": (Language.HASKELL, _DASHES),
    ".html": (Language.HTML, ()),
    ".htm": (Language.HTML, ()),
    ".idr": (Language.IDRIS, _DASHES),
    ".java": (Language.JAVA, _SLASHES),
    ".js": (Language.JAVASCRIPT, _SLASHES),
    ".mjs": (Language.JAVASCRIPT, _SLASHES),
    ".cjs": (Language.JAVASCRIPT, _SLASHES),
    ".jsx": (Language.JAVASCRIPT, _SLASHES),
    ".jl": (Language.JULIA, _HASH),
    ".ipynb": (Language.JUPYTER, ()),
    ".kt": (Language.KOTLIN, _SLASHES),
    ".kts": (Language.KOTLIN, _SLASHES),
    ".lisp": (Language.LISP, _SEMICOLON),
    ".lsp": (Language.LISP, _SEMICOLON),
    ".lua": (Language.LUA, _DASHES),
    ".md": (Language.MARKDOWN, ()),
    ".markdown": (Language.MARKDOWN, ()),
    ".nim": (Language.NIM, _HASH),
    ".nix": (Language.NIX, _HASH),
    ".m": (Language.OBJECTIVE_C, _SLASHES),
    ".mm": (Language.OBJECTIVE_C, _SLASHES),
    ".ml": (Language.OCAML, ()),
    ".mli": (Language.OCAML, ()),
    ".org": (Language.ORG, ("# ",)),
    ".pl": (Language.PERL, _HASH),
    ".pm": (Language.PERL, _HASH),
    ".php": (Language.PHP, ("//", "#")),
    ".pro": (Language.PROLOG, _PERCENT),
    ".purs": (Language.PURESCRIPT, _DASHES),
    ".py": (Language.PYTHON, _HASH),
    ".pyi": (Language.PYTHON, _HASH),
    ".r": (Language.R, _HASH),
    ".R": (Language.R, _HASH),
    ".rkt": (Language.RACKET, _SEMICOLON),
    ".rb": (Language.RUBY, _HASH),
    ".rs": (Language.RUST, _SLASHES),
    ".scala": (Language.SCALA, _SLASHES),
    ".sh": (Language.SHELL, _HASH),
    ".bash": (Language.SHELL, _HASH),
    ".zsh": (Language.SHELL, _HASH),
    ".swift": (Language.SWIFT, _SLASHES),
    ".tcl": (Language.TCL, _HASH),
    ".tex": (Language.TEX, _PERCENT),
    ".sty": (Language.TEX, _PERCENT),
    ".ts": (Language.TYPESCRIPT, _SLASHES),
    ".tsx": (Language.TYPESCRIPT, _SLASHES),
    ".vue": (Language.VUE, _SLASHES),
    ".xml": (Language.XML, ()),
    ".zig": (Language.ZIG, _SLASHES),
}


def classify_file(file_name: str) -> tuple[Language, tuple[str, ...]] | None:
    if file_name in EXTENSIONS:
        return EXTENSIONS[file_name]
    suffix = os.path.splitext(file_name)[1]
    return EXTENSIONS.get(suffix) or EXTENSIONS.get(suffix.lower())


def count_code_lines(path: Path, comment_prefixes: tuple[str, ...]) -> int:
    code = 0
    with path.open("r", encoding="utf-8", errors="ignore") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped:
                continue
            if comment_prefixes and stripped.startswith(comment_prefixes):
                continue
            code += 1
    return code


class ExtensionLineCounter(LanguageCounter):
    """Counts non-blank, non-comment lines per language, keyed by file extension.

    Files come from ``git ls-files`` so ``.gitignore`` rules apply; when git
    cannot list the directory it is walked instead. Hidden files and
    directories are skipped either way. Ignore patterns are shell globs: a
    pattern without ``/`` matches any file or directory name, one with ``/``
    matches the path relative to the scanned directory, prefixed by ``/``.
    A trailing ``/`` on a pattern is ignored.
    """

    __slots__ = ("__git_timeout_sec", "__git_executable")

    def __init__(self, git_timeout_sec: float = 30.0, git_executable: str = "git") -> None:
        self.__git_timeout_sec = git_timeout_sec
        self.__git_executable = git_executable

    def count(self, directory: Path, ignored_paths: list[str]) -> dict[Language, int]:
        patterns = [p.rstrip("/") for p in ignored_paths if p.rstrip("/")]
        name_patterns = [p for p in patterns if "/" not in p]
        path_patterns = [p for p in patterns if "/" in p]

        def is_ignored(name: str, relative: str) -> bool:
            if name.startswith("."):
                return True
            if any(fnmatchcase(name, pattern) for pattern in name_patterns):
                return True
            return any(fnmatchcase(relative, pattern) for pattern in path_patterns)

        listed = self.list_files(directory)
        if listed is None:
            files = _walk(directory, is_ignored)
        else:
            files = (directory / relative for relative in listed if not _is_excluded(relative, is_ignored))

        counts: dict[Language, int] = defaultdict(int)
        for path in files:
            classified = classify_file(path.name)
            if classified is None:
                continue
            language, comment_prefixes = classified
            try:
                counts[language] += count_code_lines(path, comment_prefixes)
            except OSError as exc:
                logger.debug("skipping unreadable file %s: %s", path, exc)

        return dict(counts)

    def list_files(self, directory: Path) -> list[str] | None:
        """Tracked and untracked-but-not-ignored files relative to ``directory``, or None."""
        command = [self.__git_executable, "ls-files", "-z", "--cached", "--others", "--exclude-standard"]
        try:
            proc = subprocess.run(
                command,
                cwd=directory,
                capture_output=True,
                timeout=self.__git_timeout_sec,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.debug("cannot list files in %s, walking instead: %s", directory, exc)
            return None
        if proc.returncode != 0:
            logger.debug(
                "cannot list files in %s, walking instead: %s",
                directory,
                proc.stderr.decode("utf-8", errors="replace").strip(),
            )
            return None
        # unmerged paths are listed once per stage
        entries = proc.stdout.decode("utf-8", errors="replace").split("\0")
        return list(dict.fromkeys(entry for entry in entries if entry))


def _is_excluded(relative: str, is_ignored: Callable[[str, str], bool]) -> bool:
    parts = relative.split("/")
    return any(is_ignored(part, "/" + "/".join(parts[: index + 1])) for index, part in enumerate(parts))


def _walk(directory: Path, is_ignored: Callable[[str, str], bool]) -> Iterator[Path]:
    def onerror(err: OSError) -> None:
        logger.debug("skipping unreadable path: %s", err)

    for dirpath, dirnames, filenames in os.walk(directory, onerror=onerror):
        base = Path(dirpath)
        relative_base = "/" + base.relative_to(directory).as_posix() if base != directory else ""
        dirnames[:] = sorted(d for d in dirnames if not is_ignored(d, f"{relative_base}/{d}"))
        for file_name in filenames:
            if not is_ignored(file_name, f"{relative_base}/{file_name}"):
                yield base / file_name
