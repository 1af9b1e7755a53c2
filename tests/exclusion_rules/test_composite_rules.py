import pytest

from dircombine.exclusion_rules.composite_rules import CompositeExclusionRules
from dircombine.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dircombine.exclusion_rules.substring_rules import SubstringExclusionRules


def test_composite_rules_any_rule_excludes(tmp_path):
    rules_file = tmp_path / "rules.ignore"
    rules_file.write_text("*.log\n")
    git_rules = GitIgnoreExclusionRules(rules_file, root=tmp_path)
    composite = CompositeExclusionRules([SubstringExclusionRules(["dist"]), git_rules])

    assert composite.exclude(tmp_path / "dist" / "bundle.js")
    assert composite.exclude(tmp_path / "server.log")
    assert not composite.exclude(tmp_path / "src" / "main.js")


def test_composite_rules_keeps_given_order():
    first = SubstringExclusionRules(["a"])
    second = SubstringExclusionRules(["b"])
    composite = CompositeExclusionRules((first, second))
    assert composite.rules == [first, second]


def test_composite_rules_requires_rules():
    with pytest.raises(ValueError):
        CompositeExclusionRules([])


def test_composite_rules_rejects_non_rules():
    with pytest.raises(TypeError, match="index 1"):
        CompositeExclusionRules([SubstringExclusionRules(), "*.log"])
