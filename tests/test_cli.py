"""End-to-end runs through the command line entry point."""

import json

from locale_checker.cli import main


def test_scenario_output(scenario_tree, capsys):
    assert main([str(scenario_tree)]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Looking at namespace 'common.json'",
        "Key 'bye' is missing in 'fr' locale",
    ]


def test_each_namespace_gets_a_header(make_tree, capsys):
    root = make_tree(
        {
            "en": {"common.json": {"a": "1"}, "errors.json": {"e": "1"}},
            "fr": {"common.json": {"a": "1"}, "errors.json": {}},
        }
    )
    main([str(root)])

    assert capsys.readouterr().out.splitlines() == [
        "Looking at namespace 'common.json'",
        "Looking at namespace 'errors.json'",
        "Key 'e' is missing in 'fr' locale",
    ]


def test_sort_flag_rewrites_and_reports(make_tree, capsys):
    root = make_tree({"en": {"common.json": '{"b": "2", "a": "1"}'}})
    path = root / "en" / "common.json"

    assert main([str(root), "--sort"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        f"Sorting {path}",
        "Looking at namespace 'common.json'",
    ]
    assert path.read_text(encoding="utf-8") == '{\n  "a": "1",\n  "b": "2"\n}'


def test_fail_on_missing(scenario_tree):
    assert main([str(scenario_tree), "--fail-on-missing"]) == 1


def test_fail_on_missing_passes_when_complete(make_tree):
    root = make_tree(
        {"en": {"common.json": {"a": "1"}}, "fr": {"common.json": {"a": "2"}}}
    )
    assert main([str(root), "--fail-on-missing"]) == 0


def test_report_missing_namespaces(make_tree, capsys):
    root = make_tree(
        {"en": {"common.json": {"a": "1"}}, "fr": {"other.json": {"b": "1"}}}
    )
    code = main([str(root), "--report-missing-namespaces", "--fail-on-missing"])

    assert code == 1
    assert capsys.readouterr().out.splitlines() == [
        "Looking at namespace 'common.json'",
        "Namespace 'common.json' is missing in 'fr' locale",
        "Looking at namespace 'other.json'",
        "Namespace 'other.json' is missing in 'en' locale",
    ]


def test_missing_root_is_fatal(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err


def test_invalid_jobs_value(scenario_tree, capsys):
    assert main([str(scenario_tree), "--jobs", "0"]) == 2
    assert "workers" in capsys.readouterr().err


def test_verbose_summary_lists_skips(make_tree, capsys):
    root = make_tree(
        {
            "en": {"common.json": {"a": "1"}},
            "fr": {"common.json": {"a": ["not", "a", "string"]}},
        }
    )
    main([str(root), "--verbose", "--log-level", "ERROR"])

    out = capsys.readouterr().out
    assert "Skipped entries: 1" in out
    assert "non_string_value" in out
    assert "Languages: 2" in out


def test_parallel_run_output_matches(make_tree, capsys):
    root = make_tree(
        {
            name: {"common.json": {k: "v" for k in keys}}
            for name, keys in {
                "de": ["a", "b"],
                "en": ["a", "b", "c"],
                "fr": ["c"],
                "ko": ["a"],
            }.items()
        }
    )
    main([str(root)])
    sequential = capsys.readouterr().out
    main([str(root), "-j", "4"])
    parallel = capsys.readouterr().out

    assert parallel == sequential
    assert "Key 'c' is missing in 'de' locale" in sequential


def test_sorted_file_round_trips(make_tree):
    root = make_tree({"en": {"common.json": '{"b": "2", "a": "1"}'}})
    main([str(root), "-s"])
    assert json.loads((root / "en" / "common.json").read_text(encoding="utf-8")) == {
        "a": "1",
        "b": "2",
    }


def test_unpaired_surrogate_file_does_not_break_report(make_tree, capsys):
    root = make_tree(
        {
            "en": {"common.json": '{"\\ud800": "x", "a": "1"}'},
            "fr": {"common.json": {"a": "1"}},
        }
    )
    assert main([str(root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Looking at namespace 'common.json'"]


def test_sort_keeps_existing_tmp_file(make_tree):
    root = make_tree(
        {"en": {"common.json": '{"b": "2", "a": "1"}', "common.json.tmp": {"keep": "me"}}}
    )
    main([str(root), "--sort"])

    assert json.loads((root / "en" / "common.json.tmp").read_text(encoding="utf-8")) == {
        "keep": "me"
    }


def test_indent_option(make_tree):
    root = make_tree({"en": {"common.json": '{"b": "2", "a": "1"}'}})
    main([str(root), "--sort", "--indent", "4"])
    assert (root / "en" / "common.json").read_text(encoding="utf-8") == (
        '{\n    "a": "1",\n    "b": "2"\n}'
    )
