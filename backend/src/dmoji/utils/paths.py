"""
路径与仓库定位工具。

定位：
- 开发期（源码 checkout）没有安装好的 share/dmoji，需要从仓库根目录的 data/ 读取示例数据表。
- 安装后则从 `<prefix>/share/dmoji` 读取（与 pyproject 的 data-files 对应）。
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


APP_NAME = "dmoji"


def find_repo_root(start: Path | None = None) -> Path | None:
    """向上搜索仓库根目录（基于目录特征）；找不到返回 None（已安装场景是常态）。"""

    cur = (start or Path(__file__)).resolve()
    if cur.is_file():
        cur = cur.parent

    for _ in range(20):
        if (cur / "pyproject.toml").exists() and (cur / "backend").exists() and (cur / "data").exists():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def repo_data_dir() -> Path | None:
    root = find_repo_root()
    return root / "data" if root is not None else None


def prefix_data_dir() -> Path:
    return Path(sys.prefix) / "share" / APP_NAME


def script_data_dir() -> Path | None:
    """相对于启动脚本：`<bin>/../share/dmoji`。"""

    if not sys.argv or not sys.argv[0]:
        return None
    exe = Path(sys.argv[0]).resolve()
    return exe.parent.parent / "share" / APP_NAME


def user_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME
