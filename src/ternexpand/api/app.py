"""ternexpand HTTP API (FastAPI).

This module is optional and requires the `api` extra.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

try:
    from fastapi import FastAPI, HTTPException
    from fastapi.responses import JSONResponse
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "ternexpand HTTP API requires FastAPI. Install with: pip install 'ternexpand[api]'"
    ) from e

from pydantic import BaseModel, Field

from ternexpand.core.config import TernExpandConfig, get_config
from ternexpand.core.models import FnNode, MarkerStyle
from ternexpand.services.expand_service import ExpandService
from ternexpand.signature.parser import SignatureStructureError
from ternexpand.signature.printer import render_signature


class ExpandRequest(BaseModel):
    signature: str = Field(..., description="Tern type string, e.g. 'fn(a, b) -> number'")
    name: str = Field(default="", description="Completion name prefixed to the snippet")
    style: MarkerStyle | None = Field(default=None, description="Override the configured marker style")


class CompletionItem(BaseModel):
    name: str = Field(default="", description="Completion name")
    type: str = Field(..., description="Tern type string of the completion")


class BatchExpandRequest(BaseModel):
    items: list[CompletionItem] = Field(default_factory=list, description="Completions to expand")
    style: MarkerStyle | None = Field(default=None, description="Override the configured marker style")


class ParseRequest(BaseModel):
    signature: str = Field(..., description="Tern type string to parse")


def _structure_error(e: SignatureStructureError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": e.message, "details": e.details},
    )


def create_app(config: TernExpandConfig | None = None) -> FastAPI:
    config = config or get_config()

    app = FastAPI(
        title="ternexpand API",
        version="0.1.0",
    )

    def _service(style: MarkerStyle | None) -> ExpandService:
        return ExpandService(config, style=style)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "style": config.snippet_style.value}

    @app.post("/expand")
    def expand(req: ExpandRequest) -> JSONResponse:
        try:
            result = _service(req.style).expand(req.signature, name=req.name)
        except SignatureStructureError as e:
            raise _structure_error(e) from e
        return JSONResponse(content=asdict(result))

    @app.post("/expand/batch")
    def expand_batch(req: BatchExpandRequest) -> JSONResponse:
        try:
            results = _service(req.style).expand_many((item.name, item.type) for item in req.items)
        except SignatureStructureError as e:
            raise _structure_error(e) from e
        return JSONResponse(content=[asdict(r) for r in results])

    @app.post("/parse")
    def parse(req: ParseRequest) -> JSONResponse:
        try:
            parsed = _service(None).parse(req.signature)
        except SignatureStructureError as e:
            raise _structure_error(e) from e

        tree: Any = parsed.model_dump(mode="json") if isinstance(parsed, FnNode) else parsed
        return JSONResponse(
            content={
                "tree": tree,
                "repr": render_signature(parsed) if parsed is not None else None,
            }
        )

    return app
