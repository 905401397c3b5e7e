"""
dmoji 命令行入口。

用法：
  dmoji                      # 等价于 dmoji pick：dmenu 选择 → wl-copy 复制
  dmoji list [--with-emoji]  # 打印全部 key
  dmoji lookup "grinning face"
  dmoji serve [--host 127.0.0.1] [--port 7131] [--log-level info]

全局参数：
  --config PATH  --data-dir PATH  --key-field {description,name}  -v/--verbose

退出码：成功 0；数据目录缺失、菜单/剪贴板进程失败、选择不在 catalog 中、配置错误 → 1。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import ConfigError, DmojiConfig, load_config
from .domain.catalog import lookup
from .infra.datadir import DataDir, DataDirNotFoundError
from .infra.picker import PickerError, choose, copy_text


logger = logging.getLogger("dmoji")

EXIT_OK = 0
EXIT_FAILURE = 1


def setup_logging(verbose: bool = False) -> None:
    root = logging.getLogger("dmoji")
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter("dmoji: %(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dmoji", description="emoji picker built on the Unicode emoji sequence tables")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--data-dir", type=Path, default=None)
    parser.add_argument("--key-field", choices=("description", "name"), default=None)
    parser.add_argument("-v", "--verbose", action="store_true", default=False)

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("pick", help="choose with the menu command and copy the emoji")

    p_list = sub.add_parser("list", help="print every catalog key")
    p_list.add_argument("--with-emoji", action="store_true", default=False)

    p_lookup = sub.add_parser("lookup", help="print the emoji for one description")
    p_lookup.add_argument("description")

    p_serve = sub.add_parser("serve", help="run the HTTP lookup service")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.add_argument("--log-level", default=None)
    return parser


def load_catalog(cfg: DmojiConfig, args: argparse.Namespace) -> dict[str, str]:
    data = DataDir.locate(args.data_dir or cfg.data_dir)
    key_field = args.key_field or cfg.key_field
    return data.load_catalog(cfg.files, key_field=key_field)


def cmd_pick(cfg: DmojiConfig, catalog: dict[str, str]) -> int:
    selection = choose(catalog.keys(), cfg.menu_command)
    emoji = lookup(catalog, selection)
    if emoji is None:
        # 未选择或选择不存在：静默失败
        return EXIT_FAILURE
    copy_text(emoji, cfg.copy_command)
    return EXIT_OK


def cmd_list(catalog: dict[str, str], *, with_emoji: bool) -> int:
    for key, emoji in catalog.items():
        print(f"{emoji}\t{key}" if with_emoji else key)
    return EXIT_OK


def cmd_lookup(catalog: dict[str, str], description: str) -> int:
    emoji = lookup(catalog, description)
    if emoji is None:
        logger.error("未找到：%r", description.strip())
        return EXIT_FAILURE
    print(emoji)
    return EXIT_OK


def cmd_serve(cfg: DmojiConfig, catalog: dict[str, str], args: argparse.Namespace) -> int:
    import uvicorn

    from .api.server import create_app

    uvicorn.run(
        create_app(catalog),
        host=args.host or cfg.server.host,
        port=args.port or cfg.server.port,
        log_level=args.log_level or cfg.server.log_level,
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.verbose)

    try:
        cfg = load_config(args.config)
        catalog = load_catalog(cfg, args)

        command = args.command or "pick"
        if command == "list":
            return cmd_list(catalog, with_emoji=args.with_emoji)
        if command == "lookup":
            return cmd_lookup(catalog, args.description)
        if command == "serve":
            return cmd_serve(cfg, catalog, args)
        return cmd_pick(cfg, catalog)

    except (ConfigError, DataDirNotFoundError, PickerError) as e:
        logger.error("%s", e)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
