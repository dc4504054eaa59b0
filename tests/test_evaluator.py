import io
import logging

from hunkfilter.evaluator import HunkEvaluator, evaluate
from hunkfilter.matchers import Matcher
from hunkfilter.models import FilterConfig, Hunk, Line, MatchKind, Polarity


def include(pattern):
    return Matcher(Polarity.INCLUDE, MatchKind.REGEX, pattern)


def exclude(pattern):
    return Matcher(Polarity.EXCLUDE, MatchKind.REGEX, pattern)


def hunk(*lines):
    return Hunk(lines=[Line(raw, significant) for raw, significant in lines])


HEADER = (b"--- a/f\n", False)


def test_include_match_keeps(config):
    h = hunk(HEADER, (b"+foo\n", True))
    assert evaluate(h, [include("foo")], config)


def test_include_only_default_deny(config):
    h = hunk(HEADER, (b"+bar\n", True))
    assert not evaluate(h, [include("foo")], config)


def test_exclude_match_discards(config):
    h = hunk(HEADER, (b"+foo\n", True))
    assert not evaluate(h, [exclude("foo")], config)


def test_exclude_only_default_keep(config):
    h = hunk(HEADER, (b"+bar\n", True))
    assert evaluate(h, [exclude("foo"), exclude("baz")], config)


def test_mixed_list_with_no_match_discards(config):
    h = hunk(HEADER, (b"+qux\n", True))
    assert not evaluate(h, [exclude("foo"), include("bar")], config)


def test_first_significant_line_wins_over_list_order(config):
    # line 1 matches the Include, line 2 matches the earlier Exclude
    h = hunk(HEADER, (b"+B here\n", True), (b"-A here\n", True))
    assert evaluate(h, [exclude("A"), include("B")], config)


def test_list_order_decides_within_a_line(config):
    h = hunk(HEADER, (b"+A and B\n", True))
    assert not evaluate(h, [exclude("A"), include("B")], config)
    assert evaluate(h, [include("B"), exclude("A")], config)


def test_later_line_does_not_override_latched_match(config):
    h = hunk(HEADER, (b"-A\n", True), (b"+B\n", True))
    assert not evaluate(h, [exclude("A"), include("B")], config)


def test_insignificant_lines_never_match(config):
    h = hunk(HEADER, (b" foo in context\n", False), (b"+other\n", True))
    assert not evaluate(h, [include("foo")], config)


def test_hunk_without_significant_lines_is_kept(config):
    h = hunk(HEADER, (b" context\n", False))
    assert evaluate(h, [include("foo")], config)
    assert evaluate(Hunk(), [include("foo")], config)


def test_process_writes_kept_hunk_verbatim(config):
    out = io.BytesIO()
    h = hunk(HEADER, (b"+foo\r\n", True), (b" ctx", False))
    evaluator = HunkEvaluator([include("foo")], config, out)
    assert evaluator.process(h)
    assert out.getvalue() == b"--- a/f\n+foo\r\n ctx"


def test_process_writes_nothing_for_discarded_hunk(config):
    out = io.BytesIO()
    evaluator = HunkEvaluator([include("foo")], config, out)
    assert not evaluator.process(hunk(HEADER, (b"+bar\n", True)))
    assert out.getvalue() == b""


def test_verbose_diagnostics(caplog):
    config = FilterConfig(verbose=True)
    h = hunk(HEADER, (b"+foo\n", True))
    with caplog.at_level(logging.DEBUG, logger="hunkfilter"):
        assert not evaluate(h, [exclude("foo")], config)
    messages = [r.getMessage() for r in caplog.records]
    assert "Parsing hunk (2 lines)" in messages
    assert "  * +foo" in messages
    assert "  line 1: matched --out=foo" in messages
    assert "Discarding hunk: matched --out=foo" in messages


def test_quiet_evaluation_logs_nothing(caplog, config):
    with caplog.at_level(logging.DEBUG, logger="hunkfilter"):
        evaluate(hunk(HEADER, (b"+foo\n", True)), [include("foo")], config)
    assert caplog.records == []
