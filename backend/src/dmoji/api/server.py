"""
dmoji HTTP 查询服务（FastAPI）。

约定：
- 默认端口：7131（`dmoji serve`）
- catalog 在启动时构建一次，之后只读；所有端点都只查询，不修改。

端点：
- GET /health                    → 服务状态与条目数
- GET /emoji?q=...&limit=...     → key 的大小写不敏感子串搜索（catalog 插入顺序）
- GET /emoji/{description}       → 精确查找（与菜单选择一致，先去首尾空白）；不存在 404
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .. import __version__
from ..domain.catalog import lookup, search
from ..domain.sequence import codepoints_of


class EmojiEntry(BaseModel):
    description: str
    emoji: str
    codepoints: list[str]


class SearchResult(BaseModel):
    query: str
    total: int
    results: list[EmojiEntry]


def _entry(description: str, emoji: str) -> EmojiEntry:
    return EmojiEntry(description=description, emoji=emoji, codepoints=codepoints_of(emoji))


def create_app(catalog: dict[str, str]) -> FastAPI:
    app = FastAPI(title="dmoji", version=__version__)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "entries": len(catalog)}

    @app.get("/emoji", response_model=SearchResult)
    def api_search(q: str = "", limit: int = Query(default=50, ge=1, le=1000)) -> SearchResult:
        hits = search(catalog, q, limit=limit)
        return SearchResult(query=q, total=len(hits), results=[_entry(k, v) for k, v in hits])

    @app.get("/emoji/{description:path}", response_model=EmojiEntry)
    def api_lookup(description: str) -> EmojiEntry:
        emoji = lookup(catalog, description)
        if emoji is None:
            raise HTTPException(status_code=404, detail=f"未找到：{description.strip()!r}")
        return _entry(description.strip(), emoji)

    return app
