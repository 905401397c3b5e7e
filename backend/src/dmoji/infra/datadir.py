"""
数据目录定位与数据表加载。

定位：
- 解析逻辑（domain/）不感知文件系统；这里把“去哪里找 emoji-sequences.txt”收敛到一个接口：
  `DataDir.load_file(name) -> str`。
- 候选目录按优先级依次尝试，只有包含 emoji-sequences.txt 的目录才算找到：
  1) 显式指定（CLI --data-dir / 配置 data_dir）
  2) 环境变量 DMOJI_DATA_DIR
  3) `<sys.prefix>/share/dmoji`（pip 安装的 data-files）
  4) `<启动脚本>/../share/dmoji`（`make install PREFIX=...` 的布局）
  5) 仓库根目录 data/（开发期 checkout）

约束：
- 一个目录都找不到是致命错误（DataDirNotFoundError，CLI 退出码 1）。
- 单个文件读取失败只记 warning 并按空文本处理，不中断 catalog 构建。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..domain.catalog import KeyField, build_catalog
from ..domain.scanner import EmojiRecord, scan_emoji
from ..utils.paths import prefix_data_dir, repo_data_dir, script_data_dir


logger = logging.getLogger(__name__)

EMOJI_SEQUENCES = "emoji-sequences.txt"
EMOJI_ZWJ_SEQUENCES = "emoji-zwj-sequences.txt"
DEFAULT_FILES = (EMOJI_SEQUENCES, EMOJI_ZWJ_SEQUENCES)

DATA_DIR_ENV = "DMOJI_DATA_DIR"


class DataDirNotFoundError(RuntimeError):
    pass


def candidate_data_dirs(explicit: Path | None = None) -> list[Path]:
    out: list[Path] = []
    if explicit is not None:
        out.append(Path(explicit).expanduser())
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        out.append(Path(env).expanduser())
    out.append(prefix_data_dir())
    for p in (script_data_dir(), repo_data_dir()):
        if p is not None:
            out.append(p)
    return out


@dataclass(frozen=True)
class DataDir:
    path: Path

    @classmethod
    def locate(cls, explicit: Path | None = None) -> "DataDir":
        tried = candidate_data_dirs(explicit)
        for p in tried:
            if (p / EMOJI_SEQUENCES).is_file():
                logger.debug("使用数据目录：%s", p)
                return cls(path=p)
        raise DataDirNotFoundError("未找到数据目录（已尝试：" + ", ".join(str(p) for p in tried) + "）")

    def load_file(self, name: str) -> str:
        path = self.path / name
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("无法读取 %s：%s", path, e)
            return ""

    def records(self, files: Iterable[str] = DEFAULT_FILES) -> Iterable[EmojiRecord]:
        """按文件注册顺序串联各文件的扫描结果。"""

        for name in files:
            yield from scan_emoji(self.load_file(name))

    def load_catalog(self, files: Iterable[str] = DEFAULT_FILES, *, key_field: KeyField = "description") -> dict[str, str]:
        catalog = build_catalog(self.records(files), key_field=key_field)
        logger.debug("catalog 构建完成：%d 条（%s）", len(catalog), self.path)
        return catalog
