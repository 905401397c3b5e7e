"""
emoji 数据表的逐行扫描。

行语法（只认字面分隔符，不用正则）：

    <spec> ; <field2> ; <field3> # <description>

约定：
- 以第一个 `#` 为界：左侧是字段区，右侧（去空白）是 description；description 中后续的 `#` 原样保留。
- 字段区按 `;` 最多切三段：field1=spec，field2=类型（如 Basic_Emoji / fully-qualified），
  field3=名称（可缺省；多余的 `;` 留在 field3 中）。
- 至少需要 `spec;field2` 两段，否则不是数据行。
- 注释行（`#` 开头）左侧为空、不含 `;`，自然被跳过；空行同理。

约束：
- 不匹配语法或 spec 不可解析的行直接跳过：不抛异常、不记日志。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .sequence import Sequence, resolve_sequence


COMMENT_MARK = "#"
FIELD_SEPARATOR = ";"


@dataclass(frozen=True)
class EmojiRecord:
    sequence: Sequence
    description: str
    kind: str = ""
    name: str | None = None


def scan_line(line: str) -> EmojiRecord | None:
    head, mark, comment = line.partition(COMMENT_MARK)
    if not mark:
        return None

    fields = head.split(FIELD_SEPARATOR, 2)
    if len(fields) < 2:
        return None

    sequence = resolve_sequence(fields[0].strip())
    if sequence is None:
        return None

    name = fields[2].strip() if len(fields) == 3 else None
    return EmojiRecord(
        sequence=sequence,
        description=comment.strip(),
        kind=fields[1].strip(),
        name=name,
    )


def scan_emoji(text: str) -> Iterator[EmojiRecord]:
    """对整份文件文本做单遍扫描，逐条产出匹配行。

    只按 LF / CRLF 分行；str.splitlines 还会在 VT、NEL、U+2028 等字符处断行。
    """

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        record = scan_line(line)
        if record is not None:
            yield record
