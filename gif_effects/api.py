"""
GIF Effect Generator - FastAPI Web Server
Renders effects on request: query-string options in, image/gif out.
"""

import logging
import os
from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from . import __version__
from .effects import EFFECTS, get_effect
from .renderer import render, render_base64

logger = logging.getLogger(__name__)

app = FastAPI(title="GIF Effect Generator")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configuration
ENV_VAR = "GIF_EFFECTS_ENV"
PRODUCTION = "production"
CACHE_MAX_AGE = 3600


def cache_control() -> str:
    """Generated images are only cacheable in production."""
    if os.environ.get(ENV_VAR, "").lower() == PRODUCTION:
        return f"public, max-age={CACHE_MAX_AGE}"
    return "no-store"


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, ValueError):
        return JSONResponse(status_code=400, content={"error": str(exc)})
    logger.exception("Error generating GIF")
    return JSONResponse(status_code=500, content={"error": f"Failed to generate GIF: {exc}"})


@app.get("/favicon.ico")
def favicon():
    return Response(status_code=204)


@app.get("/api/health")
def health_check():
    return {"status": "healthy", "version": __version__}


@app.get("/api/effects")
def list_effects():
    """List the available effects and their default options."""
    effects = []
    for name, effect_class in EFFECTS.items():
        defaults = effect_class.config_class()
        effects.append({"name": name, "defaults": asdict(defaults)})
    return {"effects": effects, "total": len(effects)}


@app.get("/api/effects/{effect}")
def render_effect(effect: str, request: Request):
    """Render an effect from query-string options and return the GIF."""
    try:
        gif_bytes = render(effect, dict(request.query_params))
    except Exception as exc:  # noqa: BLE001
        return error_response(exc)

    return Response(
        content=gif_bytes,
        media_type="image/gif",
        headers={
            "Cache-Control": cache_control(),
            "Content-Disposition": "inline",
        },
    )


@app.post("/api/effects/{effect}")
def render_effect_base64(effect: str, options: Optional[Dict[str, Any]] = Body(default=None)):
    """Render an effect from a JSON body and return it base64-encoded."""
    try:
        image = render_base64(effect, options or {})
    except Exception as exc:  # noqa: BLE001
        return error_response(exc)
    return {"effect": get_effect(effect).name, "image": image}


def main() -> None:
    import uvicorn

    host = os.environ.get("GIF_EFFECTS_HOST", "0.0.0.0")
    port = int(os.environ.get("GIF_EFFECTS_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
