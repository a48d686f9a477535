from collections.abc import Callable, Sequence
from itertools import zip_longest
from typing import Any, Protocol

from colorama import Back, Fore, Style

from repofetch.summary.models import RepositorySummary
from repofetch.summary.reducers import bucket_languages

from .art import ascii_art
from .logo import LogoBlock, build_logo, resolve_colors

GUTTER = "   "
LANGUAGES_PER_ROW = 3

_COLOR_BLOCKS = (
    Back.BLACK,
    Back.RED,
    Back.GREEN,
    Back.YELLOW,
    Back.BLUE,
    Back.MAGENTA,
    Back.CYAN,
    Back.WHITE,
)


class ImageBackend(Protocol):
    def add_image(self, lines: list[str], image: Any) -> str:
        ...


def interleave(logo: LogoBlock, info_lines: Sequence[str], gutter: str = GUTTER) -> list[str]:
    """Zip logo rows and info rows; info rows past the logo keep the logo's column reserved."""
    rows: list[str] = []
    for logo_line, info_line in zip_longest(logo.lines, info_lines):
        if info_line is None:
            rows.append(logo_line)
        elif logo_line is None:
            rows.append(" " * logo.width + gutter + info_line)
        else:
            rows.append(logo_line + gutter + info_line)
    return rows


class SummaryRenderer:
    __slots__ = ("__image", "__image_backend")

    def __init__(self, image: Any = None, image_backend: ImageBackend | None = None) -> None:
        self.__image = image
        self.__image_backend = image_backend

    def render(self, summary: RepositorySummary) -> str:
        info_lines = self.info_lines(summary)

        if self.__image is not None:
            if self.__image_backend is None:
                raise ValueError("No image backend found")
            indented = [GUTTER + line for line in info_lines]
            return self.__image_backend.add_image(indented, self.__image) + "\n"

        rows = interleave(self.logo(summary), info_lines)
        return "\n".join(rows) + "\n\n"

    def logo(self, summary: RepositorySummary) -> LogoBlock:
        return build_logo(ascii_art(summary.logo_language), self.colors(summary), summary.display.bold)

    @staticmethod
    def colors(summary: RepositorySummary) -> tuple[str, ...]:
        return resolve_colors(summary.logo_language.colors, summary.display.ascii_colors)

    def info_lines(self, summary: RepositorySummary) -> list[str]:
        colors = self.colors(summary)
        color = colors[0] if colors else Fore.WHITE
        bold = summary.display.bold
        disabled = summary.display.disabled_fields

        def label(text: str) -> str:
            return f"{color}{Style.BRIGHT if bold else ''}{text}{Style.RESET_ALL}"

        lines: list[str] = []

        def field(title: str, value: object) -> None:
            lines.append(f"{label(title)}{value}")

        if not disabled.git_info:
            if summary.git_username:
                lines.append(f"{label(summary.git_username)} ~ {label(summary.git_version)}")
                length = len(summary.git_username) + len(summary.git_version) + 3
            else:
                lines.append(label(summary.git_version))
                length = len(summary.git_version)
            lines.append("-" * length)

        if not disabled.project:
            field("Project: ", summary.project_name)
        if not disabled.head:
            field("HEAD: ", summary.current_commit)
        if not disabled.pending and summary.pending:
            field("Pending: ", summary.pending)
        if not disabled.version:
            field("Version: ", summary.version)
        if not disabled.created:
            field("Created: ", summary.creation_date)

        if not disabled.languages and summary.languages:
            if len(summary.languages) > 1:
                lines.extend(self.__language_rows(summary, label))
            else:
                field("Language: ", summary.dominant_language)

        if not disabled.authors and summary.authors:
            title = "Authors: " if len(summary.authors) > 1 else "Author: "
            for index, author in enumerate(summary.authors):
                heading = title if index == 0 else " " * len(title)
                field(heading, f"{author.percentage}% {author.name} {author.commits}")

        if not disabled.last_change:
            field("Last change: ", summary.last_change)
        if not disabled.repo:
            field("Repo: ", summary.repository_url)
        if not disabled.commits:
            field("Commits: ", summary.commits)
        if not disabled.lines_of_code:
            field("Lines of code: ", summary.number_of_lines)
        if not disabled.size:
            field("Size: ", summary.repo_size)
        if not disabled.license:
            field("License: ", summary.license)

        if not summary.display.no_color_blocks:
            lines.append("")
            lines.append("".join(f"{block}   " for block in _COLOR_BLOCKS) + Style.RESET_ALL)

        return lines

    @staticmethod
    def __language_rows(summary: RepositorySummary, label: Callable[[str], str]) -> list[str]:
        title = "Languages: "
        pad = " " * len(title)
        rows: list[str] = []
        current = label(title)
        for index, (name, percentage) in enumerate(bucket_languages(summary.languages)):
            if index != 0 and index % LANGUAGES_PER_ROW == 0:
                rows.append(current)
                current = pad
            current += f"{name} ({percentage:.1f} %) "
        rows.append(current)
        return rows
