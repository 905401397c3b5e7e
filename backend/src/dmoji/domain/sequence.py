"""
码位序列（sequence spec）解析。

定位：
- 数据表每一行的第一个字段是十六进制码位描述，两种形态：
  1) 区间：`1F466..1F469`（闭区间，逐个码位展开）
  2) 字面序列：`1F469 200D 2764 FE0F 200D 1F468`（按顺序拼成一个 emoji 文本）
- 本模块只负责“分类 + 转换”，不关心描述字段与 catalog。

约束：
- 只接受大写十六进制数字（数据表本身就是大写）；小写、非十六进制字符一律视为不可解析。
- 不可解析返回 None，由调用方跳过整行；这里不抛异常，也不记日志。
- 码位必须是合法 Unicode 标量值（0..10FFFF 且不在代理区 D800..DFFF）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


HEX_DIGITS = frozenset("0123456789ABCDEF")

MAX_CODE_POINT = 0x10FFFF
SURROGATE_LOW = 0xD800
SURROGATE_HIGH = 0xDFFF

RANGE_SEPARATOR = ".."


@dataclass(frozen=True)
class CodepointRange:
    """闭区间 [low, high]；low > high 时迭代为空。"""

    low: str
    high: str

    def __iter__(self) -> Iterator[str]:
        for cp in range(ord(self.low), ord(self.high) + 1):
            # 跨越代理区时只展开标量值
            if SURROGATE_LOW <= cp <= SURROGATE_HIGH:
                continue
            yield chr(cp)

    def __len__(self) -> int:
        lo, hi = ord(self.low), ord(self.high)
        if lo > hi:
            return 0
        overlap = max(0, min(hi, SURROGATE_HIGH) - max(lo, SURROGATE_LOW) + 1)
        return hi - lo + 1 - overlap


@dataclass(frozen=True)
class LiteralSequence:
    """一个完整的 emoji 文本（可能由多个码位组成，例如 ZWJ 序列）。"""

    text: str


Sequence = Union[CodepointRange, LiteralSequence]


def is_hex_run(s: str) -> bool:
    return s != "" and all(ch in HEX_DIGITS for ch in s)


def is_scalar_value(cp: int) -> bool:
    return 0 <= cp <= MAX_CODE_POINT and not (SURROGATE_LOW <= cp <= SURROGATE_HIGH)


def parse_scalar(hex_run: str) -> str | None:
    """把一段大写十六进制转换为单个字符；非法则返回 None。"""

    if not is_hex_run(hex_run):
        return None
    cp = int(hex_run, 16)
    if not is_scalar_value(cp):
        return None
    return chr(cp)


def _resolve_range(spec: str) -> CodepointRange | None:
    parts = spec.split(RANGE_SEPARATOR)
    # 恰好两个点：`1F600...1F601` 会切出 '.1F601'，在 is_hex_run 处失败
    if len(parts) != 2:
        return None
    low = parse_scalar(parts[0])
    high = parse_scalar(parts[1])
    if low is None or high is None:
        return None
    return CodepointRange(low=low, high=high)


def _resolve_literal(spec: str) -> LiteralSequence | None:
    runs = spec.split()
    if not runs:
        return None
    chars: list[str] = []
    for run in runs:
        ch = parse_scalar(run)
        if ch is None:
            return None
        chars.append(ch)
    return LiteralSequence(text="".join(chars))


def resolve_sequence(spec: str) -> Sequence | None:
    """分类并解析一个已去除首尾空白的 spec。

    优先级：
    - 含 `..` 一律按区间处理（失败即 None，不再尝试字面序列）
    - 否则按空白分隔的字面序列处理
    """

    if RANGE_SEPARATOR in spec:
        return _resolve_range(spec)
    return _resolve_literal(spec)


def codepoints_of(text: str) -> list[str]:
    """emoji 文本 → 码位列表（`U+1F600` 形式），用于 API 展示。"""

    return [f"U+{ord(ch):04X}" for ch in text]
