"""
catalog 构建：description → emoji 文本。

定位：
- 输入是按“文件注册顺序 + 文件内行序”排列的 EmojiRecord 流。
- 字面序列：`description → text` 直接写入。
- 区间：按码位升序展开，`"<description>-<i>" → 单字符`，i 从 0 开始，保证区间内 key 唯一。

约定：
- 后写覆盖先写（dict 插入语义）：两个文件出现同一 key 时，后加载的文件生效。
- catalog 构建一次，之后只读；不删除任何条目。
"""

from __future__ import annotations

from typing import Iterable, Literal

from .scanner import EmojiRecord
from .sequence import CodepointRange, LiteralSequence


KeyField = Literal["description", "name"]


def record_key(record: EmojiRecord, key_field: KeyField = "description") -> str:
    """选择 catalog key 的来源字段。

    - description：`#` 之后的文本（默认）
    - name：field3（Unicode 11+ 数据表的名称列）；缺省或为空时回落到 description
    """

    if key_field not in ("description", "name"):
        raise ValueError(f"未知 key_field：{key_field!r}")
    if key_field == "name" and record.name:
        return record.name
    return record.description


def insert_record(catalog: dict[str, str], record: EmojiRecord, *, key_field: KeyField = "description") -> None:
    key = record_key(record, key_field)
    seq = record.sequence
    if isinstance(seq, LiteralSequence):
        catalog[key] = seq.text
    elif isinstance(seq, CodepointRange):
        for idx, ch in enumerate(seq):
            catalog[f"{key}-{idx}"] = ch
    else:
        raise TypeError(f"未知 sequence 类型：{type(seq).__name__}")


def build_catalog(records: Iterable[EmojiRecord], *, key_field: KeyField = "description") -> dict[str, str]:
    catalog: dict[str, str] = {}
    for record in records:
        insert_record(catalog, record, key_field=key_field)
    return catalog


def lookup(catalog: dict[str, str], selection: str) -> str | None:
    """菜单返回的选择可能带换行/空白，查找前先去除。"""

    return catalog.get(selection.strip())


def search(catalog: dict[str, str], query: str, *, limit: int | None = None) -> list[tuple[str, str]]:
    """大小写不敏感的子串搜索，按 catalog 插入顺序返回。"""

    q = query.strip().casefold()
    out: list[tuple[str, str]] = []
    for key, text in catalog.items():
        if q and q not in key.casefold():
            continue
        out.append((key, text))
        if limit is not None and len(out) >= limit:
            break
    return out
