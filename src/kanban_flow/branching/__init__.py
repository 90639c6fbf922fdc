"""Branch name engine: task type detection, slugging, rendering and validation."""

from .classifier import detect_task_type
from .generator import (
    BranchNameRequest,
    ServiceBranch,
    generate_branch_name,
    generate_multi_service_branches,
    render_branch_name,
)
from .slug import clean_for_branch_name
from .templates import BRANCH_TEMPLATES, BranchTemplate, Placeholder, get_branch_templates
from .validation import BranchValidation, validate_branch_name

__all__ = [
    "BRANCH_TEMPLATES",
    "BranchNameRequest",
    "BranchTemplate",
    "BranchValidation",
    "Placeholder",
    "ServiceBranch",
    "clean_for_branch_name",
    "detect_task_type",
    "generate_branch_name",
    "generate_multi_service_branches",
    "get_branch_templates",
    "render_branch_name",
    "validate_branch_name",
]
