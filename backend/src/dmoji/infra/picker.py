"""
外部交互进程封装：菜单（默认 dmenu）与剪贴板（默认 wl-copy）。

约定：
- 菜单进程：stdin 每行一个 catalog key（插入顺序），stdout 返回用户选中的一行。
- 剪贴板进程：stdin 写入 emoji 文本的 UTF-8 字节，不追加换行。
- 不设超时：菜单一直不返回时整个程序阻塞，这是预期行为。

约束：
- 进程无法启动、输出不可读 → PickerError（CLI 退出码 1），不重试。
"""

from __future__ import annotations

import logging
import subprocess
from typing import Iterable, Sequence


logger = logging.getLogger(__name__)

DEFAULT_MENU_COMMAND = ("dmenu",)
DEFAULT_COPY_COMMAND = ("wl-copy",)


class PickerError(RuntimeError):
    pass


def _spawn(command: Sequence[str], *, capture_stdout: bool) -> subprocess.Popen[bytes]:
    if not command:
        raise PickerError("命令为空")
    try:
        return subprocess.Popen(
            list(command),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE if capture_stdout else None,
        )
    except OSError as e:
        raise PickerError(f"无法启动 {command[0]}：{e}") from e


def menu_input(keys: Iterable[str]) -> bytes:
    return "".join(f"{k}\n" for k in keys).encode("utf-8")


def choose(keys: Iterable[str], command: Sequence[str] = DEFAULT_MENU_COMMAND) -> str:
    """把 keys 交给菜单进程，返回原始选择（未 strip，由查找方处理）。"""

    proc = _spawn(command, capture_stdout=True)
    try:
        out, _ = proc.communicate(menu_input(keys))
    except OSError as e:
        proc.kill()
        raise PickerError(f"读取 {command[0]} 输出失败：{e}") from e

    try:
        selection = out.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PickerError(f"读取 {command[0]} 输出失败：{e}") from e

    logger.debug("%s 退出码=%s selection=%r", command[0], proc.returncode, selection)
    return selection


def copy_text(text: str, command: Sequence[str] = DEFAULT_COPY_COMMAND) -> None:
    proc = _spawn(command, capture_stdout=False)
    try:
        proc.communicate(text.encode("utf-8"))
    except OSError as e:
        # 与写入菜单 stdin 一致：写失败不算致命（例如进程已提前退出）
        logger.debug("写入 %s 失败：%s", command[0], e)
