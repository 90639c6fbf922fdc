"""Chinese-to-English term table used when slugging task titles.

Letters from non-Latin scripts that the table does not cover (Cyrillic, kana,
Hangul, unmapped ideographs) each become ``item`` so they are not lost.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType

# Unmapped non-Latin letters become this token
UNKNOWN_TOKEN = "item"

TRANSLITERATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "用户": "user",
        "登录": "login",
        "注册": "register",
        "管理": "manage",
        "系统": "system",
        "页面": "page",
        "功能": "feature",
        "接口": "api",
        "数据库": "database",
        "前端": "frontend",
        "后端": "backend",
        "服务": "service",
        "认证": "auth",
        "权限": "permission",
        "支付": "payment",
        "订单": "order",
        "商品": "product",
        "列表": "list",
        "详情": "detail",
        "搜索": "search",
        "筛选": "filter",
        "排序": "sort",
        "分页": "pagination",
        "上传": "upload",
        "下载": "download",
        "导入": "import",
        "导出": "export",
        "配置": "config",
        "设置": "settings",
        "优化": "optimize",
        "修复": "fix",
        "更新": "update",
        "删除": "delete",
        "添加": "add",
        "创建": "create",
        "编辑": "edit",
        "查看": "view",
        "保存": "save",
        "取消": "cancel",
        "确认": "confirm",
        "提交": "submit",
        "发布": "publish",
        "部署": "deploy",
    }
)

_LONGEST_TERM = max(len(term) for term in TRANSLITERATIONS)


def is_non_latin_letter(ch: str) -> bool:
    """Return True for alphabetic characters outside ASCII and the Latin blocks."""
    if ch.isascii() or not ch.isalpha():
        return False
    return not unicodedata.name(ch, "").startswith("LATIN")


def transliterate(text: str) -> str:
    """Replace known CJK terms with English words and other non-Latin letters with ``item``.

    The longest table entry wins at each position.  Every replacement is
    wrapped in hyphens so adjacent terms stay separate words; text outside
    non-Latin letters is copied through unchanged.
    """
    parts: list[str] = []
    i = 0
    while i < len(text):
        if not is_non_latin_letter(text[i]):
            parts.append(text[i])
            i += 1
            continue
        for size in range(min(_LONGEST_TERM, len(text) - i), 0, -1):
            word = TRANSLITERATIONS.get(text[i:i + size])
            if word is not None:
                parts.append(f"-{word}-")
                i += size
                break
        else:
            parts.append(f"-{UNKNOWN_TOKEN}-")
            i += 1
    return "".join(parts)
