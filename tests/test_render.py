import re

import pytest
from colorama import Fore, Style

from repofetch.language import Language
from repofetch.render.art import ASCII_ART, ascii_art
from repofetch.render.logo import LogoBlock, build_logo, resolve_colors
from repofetch.render.renderer import GUTTER, SummaryRenderer, interleave
from repofetch.summary.models import (
    AuthorStat,
    CommitInfo,
    DisplayConfig,
    InfoFields,
    LanguageStat,
    RepositorySummary,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text: str) -> str:
    return _ANSI.sub("", text)


def make_summary(**overrides: object) -> RepositorySummary:
    values: dict[str, object] = {
        "git_version": "git version 2.43.0",
        "git_username": "Jane Doe",
        "project_name": "rocket",
        "current_commit": CommitInfo(commit_id="3f2c1a9d8e7b", refs=("main",)),
        "version": "v1.2.0",
        "creation_date": "5 months ago",
        "languages": (
            LanguageStat(language=Language.PYTHON, percentage=75.0),
            LanguageStat(language=Language.SHELL, percentage=25.0),
        ),
        "authors": (
            AuthorStat(name="Jane Doe", commits=3, percentage=75),
            AuthorStat(name="John Roe", commits=1, percentage=25),
        ),
        "last_change": "2 hours ago",
        "repository_url": "https://github.com/acme/rocket.git",
        "commits": "4",
        "pending": "1+- 1+",
        "repo_size": "1.20 MiB (3 files)",
        "number_of_lines": 1000,
        "license": "MIT",
        "display": DisplayConfig(),
    }
    values.update(overrides)
    return RepositorySummary(**values)


def test_interleave_with_info_longer_than_logo() -> None:
    logo = LogoBlock(lines=("L1________", "L2________", "L3________"), width=10)
    info = ["i1", "i2", "i3", "i4", "i5"]

    rows = interleave(logo, info)

    assert len(rows) == 5
    assert rows[0] == "L1________" + GUTTER + "i1"
    assert rows[2] == "L3________" + GUTTER + "i3"
    assert rows[3] == " " * 10 + GUTTER + "i4"
    assert rows[4] == " " * 10 + GUTTER + "i5"


def test_interleave_with_logo_longer_than_info() -> None:
    logo = LogoBlock(lines=("a", "b", "c"), width=1)

    assert interleave(logo, ["x"]) == ["a" + GUTTER + "x", "b", "c"]


def test_interleave_keeps_empty_info_lines() -> None:
    logo = LogoBlock(lines=("ab",), width=2)

    assert interleave(logo, ["", "x"]) == ["ab" + GUTTER, "  " + GUTTER + "x"]


def test_build_logo_pads_to_the_widest_line() -> None:
    logo = build_logo("{0}ab\n{1}abcd{0}e\n", colors=(Fore.RED, Fore.BLUE))

    assert logo.width == 5
    assert [plain(line) for line in logo.lines] == ["ab   ", "abcde"]
    assert logo.lines[1].startswith(Fore.BLUE)
    assert all(Style.RESET_ALL in line for line in logo.lines)


def test_build_logo_reuses_the_last_color_for_missing_indexes() -> None:
    logo = build_logo("{3}x", colors=(Fore.GREEN,), bold=True)

    assert logo.lines == (Fore.GREEN + Style.BRIGHT + "x" + Style.RESET_ALL,)


def test_resolve_colors_overrides_by_index() -> None:
    defaults = (Fore.BLUE, Fore.YELLOW, Fore.WHITE)

    assert resolve_colors(defaults, ["1", "bogus"]) == (Fore.RED, Fore.YELLOW, Fore.WHITE)
    assert resolve_colors(defaults, []) == defaults
    assert resolve_colors(defaults, ["15", "8", "0", "3"]) == (Fore.LIGHTWHITE_EX, Fore.LIGHTBLACK_EX, Fore.BLACK)


def test_every_art_has_a_visible_width() -> None:
    for language in ASCII_ART:
        logo = build_logo(ascii_art(language), language.colors)
        assert logo.width > 0
        assert all(len(plain(line)) == logo.width for line in logo.lines)


def test_every_language_has_its_own_art() -> None:
    assert set(ASCII_ART) == set(Language)

    unknown = ascii_art(Language.UNKNOWN)
    for language in (Language.RUBY, Language.KOTLIN, Language.CSHARP, Language.HASKELL, Language.ZIG):
        assert ascii_art(language) != unknown


def test_info_lines_contain_every_field() -> None:
    lines = [plain(line) for line in SummaryRenderer().info_lines(make_summary())]

    assert lines[0] == "Jane Doe ~ git version 2.43.0"
    assert lines[1] == "-" * len("Jane Doe ~ git version 2.43.0")
    assert "Project: rocket" in lines
    assert "HEAD: 3f2c1a9 (main)" in lines
    assert "Pending: 1+- 1+" in lines
    assert "Version: v1.2.0" in lines
    assert "Created: 5 months ago" in lines
    assert "Languages: Python (75.0 %) Shell (25.0 %) " in lines
    assert "Authors: 75% Jane Doe 3" in lines
    assert "         25% John Roe 1" in lines
    assert "Last change: 2 hours ago" in lines
    assert "Repo: https://github.com/acme/rocket.git" in lines
    assert "Commits: 4" in lines
    assert "Lines of code: 1000" in lines
    assert "Size: 1.20 MiB (3 files)" in lines
    assert "License: MIT" in lines
    assert lines[-2] == ""
    assert lines[-1] == " " * 24


def test_info_lines_without_username_or_pending() -> None:
    lines = [plain(line) for line in SummaryRenderer().info_lines(make_summary(git_username="", pending=""))]

    assert lines[0] == "git version 2.43.0"
    assert lines[1] == "-" * len("git version 2.43.0")
    assert not any(line.startswith("Pending") for line in lines)


def test_single_language_and_author_use_singular_titles() -> None:
    summary = make_summary(
        languages=(LanguageStat(language=Language.RUST, percentage=100.0),),
        authors=(AuthorStat(name="Ferris", commits=7, percentage=100),),
    )

    lines = [plain(line) for line in SummaryRenderer().info_lines(summary)]

    assert "Language: Rust" in lines
    assert "Author: 100% Ferris 7" in lines


def test_many_languages_wrap_three_per_row_with_other_bucket() -> None:
    languages = tuple(
        LanguageStat(language=language, percentage=percentage)
        for language, percentage in [
            (Language.RUST, 40.0),
            (Language.GO, 20.0),
            (Language.C, 10.0),
            (Language.JAVA, 10.0),
            (Language.PYTHON, 8.0),
            (Language.RUBY, 6.0),
            (Language.LUA, 4.0),
            (Language.PERL, 2.0),
        ]
    )

    lines = [plain(line) for line in SummaryRenderer().info_lines(make_summary(languages=languages))]

    start = lines.index("Languages: Rust (40.0 %) Go (20.0 %) C (10.0 %) ")
    assert lines[start + 1] == "           Java (10.0 %) Python (8.0 %) Ruby (6.0 %) "
    assert lines[start + 2] == "           Other (6.0 %) "


def test_disabled_fields_are_hidden() -> None:
    display = DisplayConfig(
        disabled_fields=InfoFields.disabled(["git-info", "authors", "languages", "license"]),
        no_color_blocks=True,
    )

    lines = [plain(line) for line in SummaryRenderer().info_lines(make_summary(display=display))]

    assert lines[0] == "Project: rocket"
    assert lines[-1] == "Size: 1.20 MiB (3 files)"
    assert not any(line.startswith(("Authors", "Languages", "License")) for line in lines)


def test_unknown_info_field_is_rejected() -> None:
    with pytest.raises(ValueError):
        InfoFields.disabled(["color"])


def test_labels_use_the_first_logo_color() -> None:
    summary = make_summary(display=DisplayConfig(bold=False, ascii_colors=("1",)))

    lines = SummaryRenderer().info_lines(summary)

    assert lines[2] == f"{Fore.RED}Project: {Style.RESET_ALL}rocket"


def test_render_places_the_logo_left_of_the_info() -> None:
    summary = make_summary()
    renderer = SummaryRenderer()
    logo = renderer.logo(summary)
    info = renderer.info_lines(summary)

    output = renderer.render(summary)

    rows = output.split("\n")
    assert output.endswith("\n\n")
    assert rows[: max(len(logo.lines), len(info))] == interleave(logo, info)
    assert plain(rows[0]).startswith(plain(logo.lines[0]) + GUTTER)


def test_custom_logo_language_wins_over_dominant() -> None:
    summary = make_summary(display=DisplayConfig(ascii_language=Language.GO))

    logo = SummaryRenderer().logo(summary)

    assert logo == build_logo(ascii_art(Language.GO), Language.GO.colors, True)


class RecordingImageBackend:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.image: object = None

    def add_image(self, lines: list[str], image: object) -> str:
        self.lines = lines
        self.image = image
        return "<image>"


def test_image_mode_delegates_to_the_backend() -> None:
    backend = RecordingImageBackend()
    image = object()
    summary = make_summary()

    output = SummaryRenderer(image=image, image_backend=backend).render(summary)

    assert output == "<image>\n"
    assert backend.image is image
    assert backend.lines == [GUTTER + line for line in SummaryRenderer().info_lines(summary)]


def test_image_mode_without_backend_fails() -> None:
    with pytest.raises(ValueError):
        SummaryRenderer(image=object()).render(make_summary())
