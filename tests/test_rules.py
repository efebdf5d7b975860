"""Tests for rule string display helpers."""

from fieldkit.schema.rules import format_rules, rule_names, split_rules


class TestSplitRules:
    """Test splitting rule strings."""

    def test_split_with_arguments(self):
        assert split_rules("nullable|min:3|max:200") == (("nullable", ()), ("min", ("3",)), ("max", ("200",)))

    def test_split_comma_arguments(self):
        assert split_rules("in:left,center,right") == (("in", ("left", "center", "right")),)

    def test_empty_string(self):
        assert split_rules("") == ()

    def test_ignores_blank_segments(self):
        assert rule_names("required||string|") == ["required", "string"]


class TestFormatRules:
    """Test display formatting."""

    def test_format(self):
        assert format_rules("nullable|min:3|max:200") == "nullable, min(3), max(200)"

    def test_unknown_rules_pass_through(self):
        assert format_rules("custom_rule:x") == "custom_rule(x)"
