"""
dmoji 配置（YAML）。

查找顺序：
1) CLI --config
2) 环境变量 DMOJI_CONFIG
3) `$XDG_CONFIG_HOME/dmoji/config.yaml`（默认 ~/.config/dmoji/config.yaml）

约定：
- 1)/2) 显式指定的文件必须存在；3) 不存在时使用默认值。
- 配置内容用 pydantic 严格校验：未知字段、类型错误直接失败（ConfigError），不做静默降级。

示例：

    data_dir: /usr/local/share/dmoji
    key_field: name
    menu_command: [rofi, -dmenu, -i]
    copy_command: [wl-copy]
    server:
      port: 7131
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .infra.datadir import DEFAULT_FILES
from .infra.picker import DEFAULT_COPY_COMMAND, DEFAULT_MENU_COMMAND
from .utils.paths import user_config_dir


CONFIG_ENV = "DMOJI_CONFIG"
CONFIG_FILENAME = "config.yaml"


class ConfigError(ValueError):
    pass


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: str = "127.0.0.1"
    port: int = Field(default=7131, ge=1, le=65535)
    log_level: str = "info"


class DmojiConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data_dir: Path | None = None
    files: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES), min_length=1)
    key_field: Literal["description", "name"] = "description"
    menu_command: list[str] = Field(default_factory=lambda: list(DEFAULT_MENU_COMMAND), min_length=1)
    copy_command: list[str] = Field(default_factory=lambda: list(DEFAULT_COPY_COMMAND), min_length=1)
    server: ServerConfig = Field(default_factory=ServerConfig)


def default_config_path() -> Path:
    return user_config_dir() / CONFIG_FILENAME


def parse_config(text: str, *, source: str = "<string>") -> DmojiConfig:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"配置文件不是合法 YAML：{source}：{e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"配置文件顶层必须是 dict：{source}")
    try:
        return DmojiConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"配置文件校验失败：{source}：{e}") from e


def load_config(path: Path | None = None) -> DmojiConfig:
    explicit = path
    if explicit is None and os.environ.get(CONFIG_ENV):
        explicit = Path(os.environ[CONFIG_ENV])

    if explicit is not None:
        p = Path(explicit).expanduser()
        if not p.is_file():
            raise ConfigError(f"找不到配置文件：{p}")
    else:
        p = default_config_path()
        if not p.is_file():
            return DmojiConfig()

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"无法读取配置文件：{p}：{e}") from e
    return parse_config(text, source=str(p))
