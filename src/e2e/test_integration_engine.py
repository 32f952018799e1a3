import re

import pytest

from fingers import ConfigurationError, Engine, Exact, NoMatch, Partial
from fingers.loader import Settings, compile_patterns
from fingers.models import Pattern


class ExplodingRegex:
    def finditer(self, text):
        raise RecursionError("maximum recursion depth exceeded")


GIT_STATUS = """
On branch ruby-rewrite-more-like-crystal-rewrite-amirite
Your branch is up to date with 'origin/ruby-rewrite-more-like-crystal-rewrite-amirite'.

Changes to be committed:
  (use "git restore --staged <file>..." to unstage)
        modified:   spec/lib/fingers/match_formatter_spec.cr

Changes not staged for commit:
  (use "git add <file>..." to update what will be committed)
        modified:   .gitignore
        modified:   spec/lib/fingers/hinter_spec.cr
        modified:   spec/spec_helper.cr
        modified:   src/fingers/cli.cr
        modified:   src/fingers/dirs.cr
        modified:   src/fingers/match_formatter.cr
"""


@pytest.mark.e2e
def test_url_and_path_on_four_keys():
    eng = Engine.from_config({"enabled_builtin_patterns": "url,path", "alphabet": "fjdk"})
    result = eng.process("visit https://example.com and /etc/hosts")

    assert [(m.pattern, m.text) for m in result.matches] == [
        ("url", "https://example.com"),
        ("path", "/etc/hosts"),
    ]
    assert [h.code for h in result.hints] == ["f", "j"]
    assert result.query("f") == Exact(0)
    assert result.query("j") == Exact(1)


@pytest.mark.e2e
def test_url_and_path_on_binary_alphabet():
    eng = Engine.from_config({"enabled_builtin_patterns": "url,path", "alphabet": "ab"})
    result = eng.process("visit https://example.com and /etc/hosts")
    assert [h.code for h in result.hints] == ["a", "b"]


@pytest.mark.e2e
def test_no_matches_is_a_normal_result():
    eng = Engine.from_config({"enabled_builtin_patterns": "url"})
    result = eng.process("nothing to see here")
    assert len(result) == 0
    assert result.hints == ()
    assert result.query("a") == NoMatch()
    assert result.report.clean


@pytest.mark.e2e
def test_overlap_keeps_earlier_declared_pattern():
    eng = Engine.from_config({
        "enabled_builtin_patterns": "",
        "pattern_0": r"abc123",
        "pattern_1": r"123",
    })
    result = eng.process("abc123")
    assert [(m.pattern, m.span) for m in result.matches] == [("pattern_0", (0, 6))]


@pytest.mark.e2e
def test_malformed_bytes_are_flagged_and_not_split():
    eng = Engine.from_config({"enabled_builtin_patterns": "path", "pattern_0": r"caf."})
    result = eng.process(b"open /srv/caf\xe2\x82 now and /etc/hosts")

    assert len(result.report.degraded) == 1
    a, b = result.report.degraded[0]
    for m in result.matches:
        assert not (a < m.span[0] < b) and not (a < m.span[1] < b)
    assert "/etc/hosts" in [m.text for m in result.matches]


@pytest.mark.e2e
def test_git_status_output_with_all_patterns():
    eng = Engine.from_config()
    result = eng.process(GIT_STATUS)

    texts = [m.text for m in result.matches]
    assert "origin/ruby-rewrite-more-like-crystal-rewrite-amirite" in texts
    assert "spec/lib/fingers/match_formatter_spec.cr" in texts
    assert ".gitignore" in texts

    codes = [h.code for h in result.hints]
    assert len(set(codes)) == len(codes) == len(result.matches)
    for x in codes:
        for y in codes:
            assert x == y or not y.startswith(x)
    for m in result.matches:
        assert result.query(result.hint_for(m.id)) == Exact(m.id)

    # same input, same answer
    again = eng.process(GIT_STATUS)
    assert [h.code for h in again.hints] == codes


@pytest.mark.e2e
def test_reuse_hints_shares_codes_between_equal_texts():
    eng = Engine.from_config({
        "enabled_builtin_patterns": "path",
        "alphabet": "asdf",
        "reuse_hints": "true",
    })
    result = eng.process("src/a.py\nsrc/b.py\nsrc/a.py\n")

    assert [m.text for m in result.matches] == ["src/a.py", "src/b.py", "src/a.py"]
    assert [h.code for h in result.hints] == ["a", "s", "a"]
    assert len(result.lookup) == 2
    assert result.query("a") == Exact(0)
    assert result.query("") == Partial((0, 1))


@pytest.mark.e2e
def test_failing_pattern_does_not_abort_the_pipeline():
    boom = Pattern(name="boom", regex=ExplodingRegex(), priority=0)
    url = Pattern(name="url", regex=re.compile(r"https?://\S+"), priority=1)
    eng = Engine(Settings(alphabet=tuple("asdf"), patterns=(boom, url)))

    result = eng.process("go to https://example.com now")
    assert [m.text for m in result.matches] == ["https://example.com"]
    assert "boom" in result.report.failures


def test_configuration_errors_surface_before_scanning():
    with pytest.raises(ConfigurationError):
        Engine.from_config({"alphabet": "a"})
    with pytest.raises(ConfigurationError):
        Engine(Settings(alphabet=tuple("asdf"), patterns=()), require_patterns=True)
    # allowed when the caller does not insist on patterns
    assert len(Engine(Settings(alphabet=tuple("asdf"), patterns=())).process("x")) == 0


def test_as_dict_shape():
    eng = Engine(Settings(alphabet=tuple("ab"), patterns=compile_patterns([("num", r"\d+")])))
    data = eng.process("1 22 333").as_dict()
    assert [row["text"] for row in data["matches"]] == ["1", "22", "333"]
    assert [row["hint"] for row in data["matches"]] == ["a", "ba", "bb"]
    assert set(data["report"]) == {"failures", "degraded"}


@pytest.mark.e2e
def test_runaway_pattern_times_out_without_blocking_the_rest():
    eng = Engine.from_config({
        "enabled_builtin_patterns": "url",
        "pattern_0": r"(a+)+$",
        "pattern_timeout": "0.05",
    })
    result = eng.process("https://x.io " + "a" * 50_000 + "b")

    assert [m.text for m in result.matches] == ["https://x.io"]
    assert "pattern_0" in result.report.failures
    assert result.report.failures["pattern_0"].startswith("TimeoutError")
