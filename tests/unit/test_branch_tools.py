"""Unit tests for the branch naming tools."""

import pytest

from kanban_flow.tools import branch_tools


def test_branch_generate():
    result = branch_tools.branch_generate(
        task_title="用户登录功能",
        service_name="auth-service",
        task_type="feature",
        task_id="abc123456",
    )
    assert result == {
        "branch_name": "feature/auth-service-user-login-feature-123456",
        "task_type": "feature",
        "validation": {"is_valid": True, "errors": []},
    }


def test_branch_generate_infers_type():
    result = branch_tools.branch_generate(task_title="修复支付错误", service_name="pay", priority="high", task_id="1")
    assert result["task_type"] == "hotfix"
    assert result["branch_name"].startswith("hotfix/pay-fix-payment-")


def test_branch_generate_rejects_bad_priority():
    with pytest.raises(ValueError):
        branch_tools.branch_generate(task_title="x", service_name="y", priority="critical")


def test_branch_generate_multi():
    result = branch_tools.branch_generate_multi(
        task_title="fix login bug", services=["svc-a", "svc-b"], priority="medium", task_id="000777"
    )
    assert result == {
        "branches": [
            {"service_name": "svc-a", "branch_name": "bugfix/svc-a-fix-login-bug-000777", "task_type": "bugfix"},
            {"service_name": "svc-b", "branch_name": "bugfix/svc-b-fix-login-bug-000777", "task_type": "bugfix"},
        ]
    }


def test_branch_validate():
    assert branch_tools.branch_validate("ab") == {"is_valid": False, "errors": ["too short"]}
    assert branch_tools.branch_validate("feature/svc-task-123456") == {"is_valid": True, "errors": []}


def test_branch_classify_and_clean():
    assert branch_tools.branch_classify("update README") == {"task_type": "docs"}
    assert branch_tools.branch_clean("订单列表") == {"slug": "order-list"}


def test_branch_templates():
    templates = branch_tools.branch_templates()
    assert set(templates) == {"feature", "bugfix", "hotfix", "refactor", "docs"}
    assert templates["refactor"]["pattern"] == "{prefix}/{service}-{title}"
