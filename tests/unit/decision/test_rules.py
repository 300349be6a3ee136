"""
Unit tests for ordered rule tables.
"""

from app.decision.rules import Rule, always, first_match


RULES = (
    Rule("negative", lambda n: n < 0, "neg"),
    Rule("zero", lambda n: n == 0, "zero"),
    Rule("small", lambda n: n < 10, "small"),
    Rule("fallback", always, "big"),
)


class TestFirstMatch:

    def test_first_rule_wins(self):
        # -1 also satisfies "small"; order decides
        assert first_match(RULES, -1).outcome == "neg"

    def test_middle_rule(self):
        assert first_match(RULES, 0).name == "zero"
        assert first_match(RULES, 5).outcome == "small"

    def test_catch_all(self):
        assert first_match(RULES, 100).outcome == "big"

    def test_no_match_returns_none(self):
        assert first_match(RULES[:2], 5) is None

    def test_empty_table(self):
        assert first_match((), 1) is None

    def test_predicate_result_coerced_to_bool(self):
        rule = Rule("truthy", lambda s: s, "ok")
        assert rule.matches("x") is True
        assert rule.matches("") is False

    def test_always(self):
        assert always(None) is True
