"""Unit tests for branch templates."""

import pytest

from kanban_flow.branching.templates import (
    BRANCH_TEMPLATES,
    TASK_TYPES,
    get_branch_templates,
    template_for,
)


def test_every_task_type_has_a_template():
    assert set(get_branch_templates()) == set(TASK_TYPES)
    for key, template in BRANCH_TEMPLATES.items():
        assert template.prefix == key


def test_patterns():
    assert BRANCH_TEMPLATES["feature"].pattern_text() == "{prefix}/{service}-{title}-{id}"
    assert BRANCH_TEMPLATES["docs"].pattern_text() == "{prefix}/{service}-{title}"
    assert BRANCH_TEMPLATES["hotfix"].includes_id
    assert not BRANCH_TEMPLATES["refactor"].includes_id


def test_templates_are_read_only():
    with pytest.raises(TypeError):
        BRANCH_TEMPLATES["chore"] = BRANCH_TEMPLATES["feature"]  # type: ignore[index]


def test_unknown_type_falls_back_to_feature():
    assert template_for("chore") is BRANCH_TEMPLATES["feature"]


def test_to_dict():
    assert BRANCH_TEMPLATES["bugfix"].to_dict() == {
        "prefix": "bugfix",
        "pattern": "{prefix}/{service}-{title}-{id}",
        "description": "Bug fix",
    }
