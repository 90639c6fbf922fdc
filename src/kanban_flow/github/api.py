"""GitHub REST API wrapper.

Each service on the board maps to a repository of the configured owner.  The
repository name is derived from the service name (see ``repo_for_service``).
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

import httpx

from ..config import Config
from ..policy.redaction import redact_secrets
from .auth import get_github_client

logger = logging.getLogger(__name__)

MERGE_METHODS = ("merge", "squash", "rebase")

_PR_NUMBER = re.compile(r"/pull/(\d+)")
_WHITESPACE = re.compile(r"\s+")


def api_base(config: Config) -> str:
    """Return the REST root for ``github.com`` or a GitHub Enterprise host."""
    if config.github_domain == "github.com":
        return "https://api.github.com"
    return f"https://{config.github_domain}/api/v3"


def repo_for_service(service_name: str) -> str:
    """Return the repository name for a service: lowercased, whitespace as hyphens."""
    return _WHITESPACE.sub("-", service_name.strip().lower())


def _repo_url(config: Config, service_name: str) -> str:
    return f"{api_base(config)}/repos/{config.github_owner}/{repo_for_service(service_name)}"


def _github_request(
    config: Config,
    method: str,
    url: str,
    *,
    json: dict[str, object] | None = None,
    allow_404: bool = False,
) -> object | None:
    """Perform an HTTP request against the configured GitHub API.

    Wraps ``httpx`` with the client from ``get_github_client``.  Non-2xx
    responses (other than 404 when ``allow_404=True``) raise ``RuntimeError``
    with the response text, secrets redacted.
    """
    if not url.startswith(api_base(config) + "/"):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    try:
        with get_github_client(config) as client:
            resp = client.request(method, url, json=json)
    except httpx.HTTPError as exc:
        message = redact_secrets(str(exc), [config.github_token])
        logger.error("GitHub API request failed: %s", message)
        raise RuntimeError(f"GitHub API request failed: {message}") from exc

    if allow_404 and resp.status_code == 404:
        return None

    if 200 <= resp.status_code < 300:
        try:
            return resp.json()
        except ValueError:
            return resp.text

    detail = redact_secrets(resp.text, [config.github_token])
    logger.error("GitHub API error %s: %s", resp.status_code, detail)
    raise RuntimeError(f"GitHub API error {resp.status_code}: {detail}")


def _pull_request_fields(data: dict) -> dict[str, object]:
    return {
        "number": data["number"],
        "html_url": data.get("html_url"),
        "state": data.get("state"),
        "merged": data.get("merged", False),
        "mergeable": data.get("mergeable"),
        "mergeable_state": data.get("mergeable_state"),
        "merged_at": data.get("merged_at"),
        "base_ref": data["base"]["ref"],
        "head_ref": data["head"]["ref"],
        "head_sha": data["head"]["sha"],
    }


def create_pull_request(
    config: Config,
    service_name: str,
    title: str,
    head: str,
    base: str,
    body: str = "",
) -> dict[str, object]:
    """Open a pull request from ``head`` into ``base`` on the service's repository."""
    url = f"{_repo_url(config, service_name)}/pulls"
    payload = {"title": title, "head": head, "base": base, "body": body}
    data = _github_request(config, "POST", url, json=payload)
    logger.info("Opened pull request #%s for %s", data["number"], service_name)
    return _pull_request_fields(data)


def summarize_checks(payload: dict) -> dict[str, object]:
    """Reduce a check-runs listing to counts plus an overall state.

    No runs counts as success.  While any run is incomplete the state is
    ``pending`` and there is no conclusion.
    """
    runs = payload.get("check_runs") or []
    total = payload.get("total_count") or 0
    completed = sum(1 for run in runs if run.get("status") == "completed")
    failed = sum(1 for run in runs if run.get("conclusion") in ("failure", "error"))

    if total == 0:
        state, conclusion = "success", "success"
    elif completed < total:
        state, conclusion = "pending", None
    elif failed > 0:
        state, conclusion = "failure", "failure"
    else:
        state, conclusion = "success", "success"

    return {
        "state": state,
        "conclusion": conclusion,
        "total_count": total,
        "completed_count": completed,
        "failed_count": failed,
    }


def pull_request_number(pull_request_url: str) -> int:
    """Extract the PR number from an ``.../pull/<n>`` URL."""
    match = _PR_NUMBER.search(pull_request_url or "")
    if not match:
        raise ValueError(f"Invalid pull request URL: {pull_request_url}")
    return int(match.group(1))


def get_pull_request_status(config: Config, service_name: str, pull_request_url: str) -> dict[str, object]:
    """Return merge state and check-run summary for a pull request.

    A failure while reading check runs is logged and reported as
    ``checks: None`` rather than failing the whole status query.
    """
    number = pull_request_number(pull_request_url)
    repo_url = _repo_url(config, service_name)
    data = _github_request(config, "GET", f"{repo_url}/pulls/{number}")
    status = _pull_request_fields(data)

    checks: dict[str, object] | None = None
    try:
        check_runs = _github_request(config, "GET", f"{repo_url}/commits/{status['head_sha']}/check-runs")
        checks = summarize_checks(check_runs)
    except RuntimeError as exc:
        logger.warning("Failed to fetch checks for %s #%s: %s", service_name, number, exc)

    status["checks"] = checks
    return status


def merge_pull_request(
    config: Config,
    service_name: str,
    pull_number: int,
    merge_method: str = "merge",
) -> dict[str, object]:
    """Merge a pull request with the given method (merge, squash or rebase)."""
    if merge_method not in MERGE_METHODS:
        raise ValueError(f"Unsupported merge method '{merge_method}'; expected one of {', '.join(MERGE_METHODS)}")
    url = f"{_repo_url(config, service_name)}/pulls/{pull_number}/merge"
    data = _github_request(config, "PUT", url, json={"merge_method": merge_method})
    logger.info("Merged pull request #%s for %s", pull_number, service_name)
    return {"merged": data.get("merged", False), "sha": data.get("sha"), "message": data.get("message")}


def get_branch(config: Config, service_name: str, branch_name: str) -> dict[str, object] | None:
    """Return the branch payload, or ``None`` if it does not exist.

    The name is percent-encoded so ``?`` and ``#`` stay part of the path;
    dot segments are rejected.
    """
    if any(segment in (".", "..") for segment in branch_name.split("/")):
        raise ValueError(f"Invalid branch name: {branch_name}")
    url = f"{_repo_url(config, service_name)}/branches/{quote(branch_name, safe='/')}"
    return _github_request(config, "GET", url, allow_404=True)
