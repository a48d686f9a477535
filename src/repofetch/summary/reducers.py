import re
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from repofetch.exceptions import NoSourceCodeFoundError
from repofetch.language import Language

from .models import UNKNOWN, AuthorStat, CommitRecord, LanguageStat, RemoteConfiguration

OTHER_LANGUAGES = "Other"
DISPLAYED_LANGUAGES = 6

_DELETED_CODES = frozenset({"D"})
_ADDED_CODES = frozenset({"A", "AM", "??"})
_MODIFIED_CODES = frozenset({"M", "MM", "R"})

_QUOTES = ("'", '"')


def parse_history(raw: str) -> tuple[CommitRecord, ...]:
    """Parse ``git log --pretty=format:%cr%x09%an`` output, newest first."""
    records: list[CommitRecord] = []
    for line in raw.splitlines():
        parts = line.split("\t", 1)
        if len(parts) != 2:
            continue
        records.append(CommitRecord(time=parts[0].strip(), author=parts[1].strip()))
    return tuple(records)


def creation_date(records: Sequence[CommitRecord]) -> str:
    if not records:
        return UNKNOWN
    return records[-1].time


def count_commits(records: Sequence[CommitRecord]) -> str:
    return str(len(records))


def _unquote(label: str) -> str:
    if len(label) >= 2 and label[0] == label[-1] and label[0] in _QUOTES:
        return label[1:-1]
    return label


def rank_authors(records: Iterable[CommitRecord], top_n: int) -> tuple[AuthorStat, ...]:
    # ties keep first-seen history order
    counts = Counter(_unquote(record.author) for record in records)
    total = sum(counts.values())
    if total == 0:
        return ()

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:top_n]
    return tuple(
        AuthorStat(name=name, commits=commits, percentage=commits * 100 // total)
        for name, commits in ranked
    )


def compute_language_stats(counts: Mapping[Language, int], directory: str = ".") -> tuple[LanguageStat, ...]:
    total = total_lines(counts)
    if total == 0:
        raise NoSourceCodeFoundError(directory)

    stats = [
        LanguageStat(language=language, percentage=100 * lines / total)
        for language, lines in counts.items()
        if lines > 0
    ]
    stats.sort(key=lambda stat: stat.percentage, reverse=True)
    return tuple(stats)


def total_lines(counts: Mapping[Language, int]) -> int:
    return sum(lines for lines in counts.values() if lines > 0)


def bucket_languages(
    stats: Sequence[LanguageStat], keep: int = DISPLAYED_LANGUAGES
) -> list[tuple[str, float]]:
    """Keep the ``keep`` top languages and fold the rest into a trailing "Other" entry."""
    entries = [(str(stat.language), stat.percentage) for stat in stats]
    if len(entries) <= keep:
        return entries
    other = sum(percentage for _, percentage in entries[keep:])
    return [*entries[:keep], (OTHER_LANGUAGES, other)]


def rewrite_ignored_paths(patterns: Iterable[str]) -> list[str]:
    rewritten: list[str] = []
    for pattern in patterns:
        # a trailing slash only marks a directory
        pattern = pattern.rstrip("/")
        if not pattern:
            continue
        if "/" not in pattern:
            rewritten.append(pattern)
        elif pattern.startswith("/"):
            rewritten.append(f"**{pattern}")
        else:
            rewritten.append(f"**/{pattern}")
    return rewritten


def summarize_pending(raw: str) -> str:
    deleted = added = modified = 0
    for line in raw.splitlines():
        if len(line) < 2:
            continue
        code = line[:2].strip()
        if code in _DELETED_CODES:
            deleted += 1
        elif code in _ADDED_CODES:
            added += 1
        elif code in _MODIFIED_CODES:
            modified += 1

    parts: list[str] = []
    if modified > 0:
        parts.append(f"{modified}+-")
    if added > 0:
        parts.append(f"{added}+")
    if deleted > 0:
        parts.append(f"{deleted}-")
    return " ".join(parts)


def parse_remote_configuration(raw: str, fallback_name: str) -> RemoteConfiguration:
    """Pick the upstream remote over origin from ``git config --list`` output."""
    origin_url = ""
    upstream_url = ""
    for line in raw.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip().lower()
        if key == "remote.origin.url":
            origin_url = value.strip()
        elif key == "remote.upstream.url":
            upstream_url = value.strip()

    url = upstream_url or origin_url
    if not url:
        return RemoteConfiguration(repository_name=fallback_name, repository_url=UNKNOWN)

    name = re.split(r"[/:]", url.rstrip("/"))[-1]
    name = name.removesuffix(".git")
    return RemoteConfiguration(repository_name=name or fallback_name, repository_url=url)


def ref_shorthand(refname: str) -> str:
    for prefix, replacement in (("refs/heads/", ""), ("refs/remotes/", ""), ("refs/tags/", "tags/")):
        if refname.startswith(prefix):
            return replacement + refname[len(prefix):]
    return refname.removeprefix("refs/")


def parse_references(raw: str, head_commit: str) -> tuple[str, ...]:
    """Short names of the refs in ``git show-ref`` output that point directly at ``head_commit``."""
    refs: list[str] = []
    for line in raw.splitlines():
        parts = line.split(None, 1)
        if len(parts) != 2:
            continue
        oid, refname = parts
        if oid != head_commit or refname.endswith("/HEAD"):
            continue
        refs.append(ref_shorthand(refname.strip()))
    return tuple(refs)


def format_repo_size(count_objects: str, tracked_files: str | None) -> str:
    size = UNKNOWN
    for line in count_objects.splitlines():
        if line.startswith("size-pack:"):
            size = line[len("size-pack:"):].strip() or UNKNOWN
            break

    if tracked_files is None:
        return size
    files = len(tracked_files.splitlines())
    return f"{size} ({files} files)"


def first_line(raw: str) -> str:
    """First non-empty line of command output, or the unknown marker."""
    for line in raw.splitlines():
        if line.strip():
            return line.strip()
    return UNKNOWN
