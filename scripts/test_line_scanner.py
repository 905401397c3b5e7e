"""
数据表逐行扫描回归测试。

覆盖：
- 标准数据行、两段字段行、三段字段行（name 列）
- 注释行、空行、缺少 `;` / `#` 的行、spec 不可解析的行
- description 中出现多个 `#`：只有第一个是分隔符
- 对仓库 data/ 示例表做整表扫描：不抛异常、条目数符合预期

用法：
  python scripts/test_line_scanner.py
"""

from __future__ import annotations

from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]


def _ensure_backend_src_on_path(repo_root: Path) -> None:
    src_dir = repo_root / "backend" / "src"
    if not src_dir.exists():
        raise RuntimeError(f"找不到 backend/src：{src_dir}")
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


_ensure_backend_src_on_path(REPO_ROOT)

from dmoji.domain.scanner import EmojiRecord, scan_emoji, scan_line  # noqa: E402
from dmoji.domain.sequence import CodepointRange, LiteralSequence  # noqa: E402


def test_basic_line() -> None:
    r = scan_line("1F600;fully-qualified # GRINNING FACE")
    assert r == EmojiRecord(
        sequence=LiteralSequence(text="\U0001F600"),
        description="GRINNING FACE",
        kind="fully-qualified",
        name=None,
    )


def test_three_fields() -> None:
    r = scan_line("1F600         ; Basic_Emoji ; grinning face   # E1.0 [1] (x)")
    assert r is not None
    assert r.description == "E1.0 [1] (x)"
    assert r.kind == "Basic_Emoji"
    assert r.name == "grinning face"

    # 多余的 `;` 留在 field3
    r = scan_line("1F600 ; a ; b ; c # d")
    assert r is not None and r.name == "b ; c" and r.description == "d"


def test_range_line() -> None:
    r = scan_line("1F466..1F469;fully-qualified # boy")
    assert r is not None
    assert r.sequence == CodepointRange(low="\U0001F466", high="\U0001F469")
    assert r.description == "boy"


def test_multi_codepoint_line() -> None:
    r = scan_line("1F469 200D 2764 FE0F 200D 1F468;fully-qualified # couple with heart")
    assert r is not None
    assert r.sequence == LiteralSequence(text="\U0001F469\u200d\u2764\ufe0f\u200d\U0001F468")
    assert r.description == "couple with heart"


def test_first_hash_is_delimiter() -> None:
    r = scan_line("0023 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap # keycap: # (#)")
    assert r is not None
    assert r.name == "keycap"
    assert r.description == "keycap: # (#)"


def test_skipped_lines() -> None:
    for line in (
        "",
        "   ",
        "# comment text",
        "# 1F600 ; fully-qualified ; x # y",
        "#EOF",
        "1F600 fully-qualified grinning face",
        "1F600 ; fully-qualified ; grinning face",
        "1F600 # grinning face",
        " ; fully-qualified # empty spec",
        "1F46G;fully-qualified # bad hex",
        "1f600;fully-qualified # lowercase",
        "D800;fully-qualified # surrogate",
        "1F600...1F601;fully-qualified # three dots",
    ):
        assert scan_line(line) is None, line


def test_scan_text() -> None:
    text = "\n".join(
        [
            "# header",
            "",
            "1F600;fully-qualified # GRINNING FACE",
            "1F46G;fully-qualified # broken",
            "1F466..1F469;fully-qualified # boy",
            "#EOF",
        ]
    )
    records = list(scan_emoji(text))
    assert [r.description for r in records] == ["GRINNING FACE", "boy"]
    assert list(scan_emoji("")) == []


def test_line_breaks_are_lf_and_crlf_only() -> None:
    text = "1F600;a # one\x0btwo\r\n1F601;a # three\u2028four\x85five\n1F602;a # six\x0c\x1c"
    records = list(scan_emoji(text))
    assert [r.description for r in records] == ["one\x0btwo", "three\u2028four\x85five", "six"]
    assert [r.sequence for r in records][0] == LiteralSequence(text="\U0001F600")


def test_scan_is_lazy() -> None:
    it = scan_emoji("1F600;a # one\n1F601;a # two\n")
    assert next(it).description == "one"
    assert next(it).description == "two"
    assert next(it, None) is None


def test_repo_sample_tables() -> None:
    seq = (REPO_ROOT / "data" / "emoji-sequences.txt").read_text(encoding="utf-8")
    zwj = (REPO_ROOT / "data" / "emoji-zwj-sequences.txt").read_text(encoding="utf-8")
    seq_records = list(scan_emoji(seq))
    zwj_records = list(scan_emoji(zwj))
    assert len(seq_records) == 13, len(seq_records)
    assert len(zwj_records) == 4, len(zwj_records)
    assert all(r.kind == "RGI_Emoji_ZWJ_Sequence" for r in zwj_records)


def main() -> None:
    test_basic_line()
    test_three_fields()
    test_range_line()
    test_multi_codepoint_line()
    test_first_hash_is_delimiter()
    test_skipped_lines()
    test_scan_text()
    test_line_breaks_are_lf_and_crlf_only()
    test_scan_is_lazy()
    test_repo_sample_tables()
    print("[OK] line scanner")


if __name__ == "__main__":
    main()
