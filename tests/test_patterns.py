import pytest

from autosavefile.core.errors import ConfigurationError
from autosavefile.core.patterns import (
    compile_pattern,
    first_ignored_match,
    matches_ignored,
    split_ignored_patterns,
)


def test_split_on_all_delimiters_in_order():
    assert split_ignored_patterns(".cs,.xml;.json:.tmp") == (".cs", ".xml", ".json", ".tmp")


def test_split_empty_yields_no_patterns():
    assert split_ignored_patterns("") == ()
    assert split_ignored_patterns(None) == ()
    assert split_ignored_patterns(",;:") == ()


def test_split_drops_empty_entries_but_keeps_whitespace():
    assert split_ignored_patterns(".cs,,.xml;") == (".cs", ".xml")
    assert split_ignored_patterns(".cs, .xml") == (".cs", " .xml")


def test_untrimmed_patterns_keep_their_spaces():
    assert not matches_ignored("/p/a.xml", " .xml", use_regex=False)
    assert not matches_ignored("/p/mydraft.txt", " draft", use_regex=True)
    assert matches_ignored("/p/my draft.txt", " draft", use_regex=True)


def test_literal_match_is_suffix_only():
    assert matches_ignored("a.generated.cs", ".generated.cs", use_regex=False)
    assert not matches_ignored("a.generated.cs.bak", ".generated.cs", use_regex=False)
    assert not matches_ignored(None, ".cs", use_regex=False)


def test_literal_mode_does_not_interpret_regex_syntax():
    assert not matches_ignored("a.cs", "\\.cs$", use_regex=False)


def test_regex_match_is_unanchored():
    assert matches_ignored("/src/obj/a.cs", "obj", use_regex=True)
    assert not matches_ignored("/src/a.cs", "\\.tmp$", use_regex=True)


def test_invalid_regex_raises_configuration_error():
    with pytest.raises(ConfigurationError) as info:
        compile_pattern("(unclosed")
    assert info.value.pattern == "(unclosed"


def test_first_match_reports_errors_and_continues():
    errors = []
    matched = first_ignored_match(
        "/x/file.tmp", ["*bad", "\\.cs$", "\\.tmp$", "file"], use_regex=True, on_error=errors.append
    )
    assert matched == "\\.tmp$"
    assert [e.pattern for e in errors] == ["*bad"]


def test_first_match_none_when_nothing_matches():
    assert first_ignored_match("/x/file.cs", [".tmp", ".bak"], use_regex=False) is None


def test_errors_share_a_base_class():
    from autosavefile.core.errors import (
        AutoSaveError,
        HostServiceUnavailable,
        MissingDocument,
        SaveActionFailure,
    )

    for error in (MissingDocument(), HostServiceUnavailable("log"), SaveActionFailure("/a", OSError())):
        assert isinstance(error, AutoSaveError)
    assert ConfigurationError("(", "missing )").reason == "missing )"
