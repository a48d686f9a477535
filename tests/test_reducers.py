"""
Property-based and example tests for the statistics reducers.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from repofetch.exceptions import NoSourceCodeFoundError
from repofetch.language import Language
from repofetch.summary import reducers
from repofetch.summary.models import CommitRecord, LanguageStat

language_counts = st.dictionaries(
    st.sampled_from([language for language in Language if language is not Language.UNKNOWN]),
    st.integers(min_value=0, max_value=10**7),
    min_size=1,
).filter(lambda counts: sum(counts.values()) > 0)

commit_records = st.lists(
    st.builds(
        CommitRecord,
        time=st.sampled_from(["2 hours ago", "3 days ago", "1 year ago"]),
        author=st.sampled_from(["Ada", "Linus", "Grace", "Ken", "Barbara"]),
    ),
    max_size=200,
)


@given(counts=language_counts)
@settings(max_examples=200)
def test_language_percentages_sum_to_one_hundred(counts: dict[Language, int]) -> None:
    stats = reducers.compute_language_stats(counts)

    assert abs(sum(stat.percentage for stat in stats) - 100.0) <= 0.01
    percentages = [stat.percentage for stat in stats]
    assert percentages == sorted(percentages, reverse=True)
    assert len({stat.language for stat in stats}) == len(stats)


def test_language_stats_drop_empty_languages() -> None:
    stats = reducers.compute_language_stats({Language.RUST: 30, Language.C: 0, Language.GO: 10})

    assert [(s.language, s.percentage) for s in stats] == [(Language.RUST, 75.0), (Language.GO, 25.0)]


def test_language_stats_keep_insertion_order_on_ties() -> None:
    stats = reducers.compute_language_stats({Language.GO: 5, Language.C: 5, Language.RUST: 5})

    assert [s.language for s in stats] == [Language.GO, Language.C, Language.RUST]


@pytest.mark.parametrize("counts", [{}, {Language.PYTHON: 0}])
def test_language_stats_without_code(counts: dict[Language, int]) -> None:
    with pytest.raises(NoSourceCodeFoundError):
        reducers.compute_language_stats(counts, "/tmp/empty")


@given(counts=language_counts)
def test_bucketing_folds_the_tail_into_other(counts: dict[Language, int]) -> None:
    stats = reducers.compute_language_stats(counts)

    bucketed = reducers.bucket_languages(stats)

    if len(stats) <= 6:
        assert bucketed == [(str(s.language), s.percentage) for s in stats]
    else:
        assert len(bucketed) == 7
        assert bucketed[:6] == [(str(s.language), s.percentage) for s in stats[:6]]
        name, other = bucketed[6]
        assert name == "Other"
        assert other == pytest.approx(sum(s.percentage for s in stats[6:]))


def test_other_is_appended_last_even_when_larger() -> None:
    stats = tuple(
        LanguageStat(language=language, percentage=percentage)
        for language, percentage in [
            (Language.RUST, 20.0),
            (Language.GO, 15.0),
            (Language.C, 12.0),
            (Language.JAVA, 11.0),
            (Language.PYTHON, 10.0),
            (Language.RUBY, 9.0),
            (Language.LUA, 8.0),
            (Language.PERL, 8.0),
            (Language.TCL, 7.0),
        ]
    )

    bucketed = reducers.bucket_languages(stats)

    assert bucketed[-1][0] == "Other"
    assert bucketed[-1][1] == pytest.approx(23.0)


@given(records=commit_records, top_n=st.integers(min_value=0, max_value=10))
@settings(max_examples=200)
def test_author_ranking_counts_every_commit(records: list[CommitRecord], top_n: int) -> None:
    everyone = reducers.rank_authors(records, top_n=len(records) + 1)
    assert sum(author.commits for author in everyone) == len(records)

    ranked = reducers.rank_authors(records, top_n=top_n)
    distinct = len({record.author for record in records})
    assert len(ranked) == min(top_n, distinct)
    commits = [author.commits for author in ranked]
    assert commits == sorted(commits, reverse=True)
    for author in ranked:
        assert author.percentage == author.commits * 100 // len(records)


def test_author_percentages_are_floored() -> None:
    records = [CommitRecord(time="now", author=name) for name in ["a", "b", "c"]]

    ranked = reducers.rank_authors(records, top_n=3)

    assert [author.percentage for author in ranked] == [33, 33, 33]


def test_author_ties_keep_first_seen_order() -> None:
    records = [CommitRecord(time="now", author=name) for name in ["zed", "amy", "amy", "zed", "bob"]]

    ranked = reducers.rank_authors(records, top_n=3)

    assert [author.name for author in ranked] == ["zed", "amy", "bob"]


def test_author_quotes_are_trimmed_once() -> None:
    records = [
        CommitRecord(time="now", author="'Ada'"),
        CommitRecord(time="now", author="Ada"),
        CommitRecord(time="now", author="\"'Ada'\""),
    ]

    ranked = reducers.rank_authors(records, top_n=5)

    assert [(a.name, a.commits) for a in ranked] == [("Ada", 2), ("'Ada'", 1)]


def test_rank_authors_of_empty_history() -> None:
    assert reducers.rank_authors([], top_n=3) == ()


def test_parse_history_skips_malformed_lines() -> None:
    raw = "2 hours ago\tAda\nnot a commit line\n\n1 year ago\tLinus Torvalds\n"

    records = reducers.parse_history(raw)

    assert records == (
        CommitRecord(time="2 hours ago", author="Ada"),
        CommitRecord(time="1 year ago", author="Linus Torvalds"),
    )
    assert reducers.creation_date(records) == "1 year ago"
    assert reducers.count_commits(records) == "2"


def test_creation_date_of_empty_history() -> None:
    assert reducers.creation_date(()) == "??"


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("M  a.txt\n?? b.txt\nD  c.txt\n", "1+- 1+ 1-"),
        ("", ""),
        ("?? new.py\nA  added.py\nAM both.py\n", "3+"),
        (" M tracked.py\nMM twice.py\nR  old -> new\n", "3+-"),
        (" D gone.txt\n", "1-"),
        ("UU conflict.txt\nx\n!! ignored\n", ""),
    ],
)
def test_summarize_pending(status: str, expected: str) -> None:
    assert reducers.summarize_pending(status) == expected


@pytest.mark.parametrize(
    ("patterns", "expected"),
    [
        (["target"], ["target"]),
        (["src/vendor"], ["**/src/vendor"]),
        (["/build/gen"], ["**/build/gen"]),
        (["*.min.js", "docs/**"], ["*.min.js", "**/docs/**"]),
        (["docs/gen/"], ["**/docs/gen"]),
        (["node_modules/"], ["node_modules"]),
        (["/"], []),
    ],
)
def test_rewrite_ignored_paths(patterns: list[str], expected: list[str]) -> None:
    assert reducers.rewrite_ignored_paths(patterns) == expected


@pytest.mark.parametrize(
    ("config", "name", "url"),
    [
        ("remote.origin.url=https://github.com/acme/rocket.git\n", "rocket", "https://github.com/acme/rocket.git"),
        ("remote.origin.url=git@github.com:acme/rocket.git\n", "rocket", "git@github.com:acme/rocket.git"),
        (
            "remote.origin.url=https://github.com/me/rocket\nremote.upstream.url=https://github.com/acme/rocket-core.git\n",
            "rocket-core",
            "https://github.com/acme/rocket-core.git",
        ),
        ("remote.origin.url=https://github.com/acme/acme.github.io\n", "acme.github.io", "https://github.com/acme/acme.github.io"),
        ("core.bare=false\n", "fallback", "??"),
    ],
)
def test_parse_remote_configuration(config: str, name: str, url: str) -> None:
    remote = reducers.parse_remote_configuration(config, fallback_name="fallback")

    assert (remote.repository_name, remote.repository_url) == (name, url)


@pytest.mark.parametrize(
    ("refname", "short"),
    [
        ("refs/heads/main", "main"),
        ("refs/remotes/origin/main", "origin/main"),
        ("refs/tags/v1.0", "tags/v1.0"),
        ("refs/notes/commits", "notes/commits"),
    ],
)
def test_ref_shorthand(refname: str, short: str) -> None:
    assert reducers.ref_shorthand(refname) == short


def test_format_repo_size() -> None:
    count_objects = "count: 3\nsize: 12.00 KiB\nin-pack: 10\nsize-pack: 48.50 KiB\n"

    assert reducers.format_repo_size(count_objects, "a\nb\n") == "48.50 KiB (2 files)"
    assert reducers.format_repo_size(count_objects, None) == "48.50 KiB"
    assert reducers.format_repo_size("count: 0\n", "") == "?? (0 files)"


def test_first_line() -> None:
    assert reducers.first_line("\nv1.0.0\nextra\n") == "v1.0.0"
    assert reducers.first_line("") == "??"
