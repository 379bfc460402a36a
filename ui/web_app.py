"""
ui/web_app.py — FastAPI web server for the Tibetan syllable composer.

Serves the single-page composer at http://localhost:<port>/ and exposes the
engine over JSON.

REST endpoints
--------------
GET  /                    HTML composer page
GET  /health              JSON health check
GET  /characters          The consonant table
GET  /subscripts/{root}   Subscripts accepted by a root
POST /compose             {"root": "ག", "subscript": "ཡ", ...}
POST /form                {"selections": [{"slot": "root", "value": "ག"}, ...]}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, field_validator

from core.config import AppConfig
from core.constants import C, Slot
from core.logger import get_logger
from engine import build_syllable, render
from pipeline.form import SyllableForm
from registry.characters import all_characters, available_subscripts_for, lookup_character

# ── Static file path ──────────────────────────────────────────────────────────
_STATIC_DIR = Path(__file__).parent / "static"

# ── FastAPI app ───────────────────────────────────────────────────────────────
app = FastAPI(title="Tibetan Syllable Composer", version="1.0")

_config: AppConfig = AppConfig()


def configure_app(config: AppConfig) -> None:
    """Apply *config* to the running app (placeholder display, etc.)."""
    global _config
    _config = config


# ── Request models ────────────────────────────────────────────────────────────

def _single_character(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    if len(v) > 1:
        raise ValueError("Slot value must be a single character")
    return v or None


class SyllableRequest(BaseModel):
    """
    Slot selections for one syllable, each a single Tibetan letter or empty.

    Unknown letters resolve to an empty slot; a missing root makes the
    request invalid rather than an error.
    """

    prefix: Optional[str] = None
    superscript: Optional[str] = None
    root: Optional[str] = None
    subscript: Optional[str] = None
    suffix: Optional[str] = None
    second_suffix: Optional[str] = None

    @field_validator("prefix", "superscript", "root", "subscript", "suffix", "second_suffix")
    @classmethod
    def must_be_single_character(cls, v: Optional[str]) -> Optional[str]:
        """Reject multi-character slot values; blank strings become ``None``."""
        return _single_character(v)


class Selection(BaseModel):
    """One form event: *slot* set to *value* (empty clears it)."""

    slot: Slot
    value: Optional[str] = None

    @field_validator("value")
    @classmethod
    def must_be_single_character(cls, v: Optional[str]) -> Optional[str]:
        return _single_character(v)


class FormRequest(BaseModel):
    """An ordered list of selections replayed through a fresh form."""

    selections: List[Selection] = []


# ── Helpers ───────────────────────────────────────────────────────────────────

def _character_row(c) -> Dict[str, Any]:
    return {
        "tibetan": c.tibetan,
        "subjoined": c.subjoined,
        "phonetic": c.phonetic,
        "phonetic_third_column": c.phonetic_third_column,
        "phonetic_as_suffix": c.phonetic_as_suffix,
        "column": c.column.value,
        "subscripts": list(c.available_subscripts()),
    }


# ── Routes ────────────────────────────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the single-page composer."""
    html_path = _STATIC_DIR / "index.html"
    return HTMLResponse(html_path.read_text(encoding="utf-8"))


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok", "characters": len(all_characters())}


@app.get("/characters")
async def characters() -> List[Dict[str, Any]]:
    return [_character_row(c) for c in all_characters()]


@app.get("/subscripts/{root}")
async def subscripts(root: str) -> Dict[str, Any]:
    if len(root) != 1:
        raise HTTPException(status_code=422, detail="Root must be a single character")
    character = lookup_character(root)
    if character is None:
        raise HTTPException(status_code=404, detail=f"Unknown root character: {root!r}")
    allowed = available_subscripts_for(character)
    return {
        "root": character.tibetan,
        "subscripts": [s for s in C.SUBSCRIPT_LETTERS if s in allowed],
    }


@app.post("/compose")
async def compose(body: SyllableRequest) -> Dict[str, Any]:
    syllable = build_syllable(
        root=body.root,
        prefix=body.prefix,
        superscript=body.superscript,
        subscript=body.subscript,
        suffix=body.suffix,
        second_suffix=body.second_suffix,
    )
    if syllable is None:
        get_logger().info("web_app", "compose_no_root", {"root": body.root or ""})
        return {"valid": False, "tibetan": _config.display.placeholder, "phonetic": ""}

    rendering = render(syllable)
    get_logger().info("web_app", "compose", {"tibetan": rendering.tibetan, "phonetic": rendering.phonetic})
    return {"valid": True, "tibetan": rendering.tibetan, "phonetic": rendering.phonetic}


@app.post("/form")
async def form(body: FormRequest) -> Dict[str, Any]:
    state = SyllableForm(placeholder=_config.display.placeholder)
    for selection in body.selections:
        state.select(selection.slot, selection.value)
    return {
        "valid": state.has_root,
        "tibetan": state.tibetan_display,
        "phonetic": state.phonetic_display,
        "menus": [
            {
                "slot": menu.slot.value,
                "options": list(menu.options),
                "selected": menu.selected,
                "disabled": menu.disabled,
            }
            for menu in state.menus()
        ],
    }


# ── Public launcher ───────────────────────────────────────────────────────────

def start_web_server(config: AppConfig, host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Apply *config* and start uvicorn in the current thread. Blocking.

    Args:
        config: Loaded application config.
        host:   Bind address override (defaults to ``config.server.host``).
        port:   TCP port override (defaults to ``config.server.port``).
    """
    configure_app(config)

    import uvicorn  # type: ignore

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=bind_host,
            port=bind_port,
            log_level="warning",
            access_log=False,
        )
    )
    get_logger().info("web_app", "server_start", {"host": bind_host, "port": bind_port})
    server.run()
