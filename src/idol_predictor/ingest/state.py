"""Load league snapshots from JSON files or HTTP endpoints."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import httpx
from pydantic import ValidationError

from idol_predictor.models import LeagueState


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class StateLoadError(Exception):
    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


def state_from_payload(payload: Mapping[str, Any], *, source: str = "<payload>") -> LeagueState:
    try:
        state = LeagueState.model_validate(payload)
    except ValidationError as exc:
        raise StateLoadError(source, f"invalid league state ({exc.error_count()} errors)") from exc
    logger.info(
        "Loaded %s: season %d, %d teams, %d games, %d players",
        source,
        state.season,
        len(state.teams),
        len(state.games),
        len(state.players),
    )
    return state


def load_state(path: Path) -> LeagueState:
    source = str(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise StateLoadError(source, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise StateLoadError(source, f"not UTF-8 text: {exc.reason}") from exc
    except OSError as exc:
        raise StateLoadError(source, f"unreadable: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise StateLoadError(source, f"invalid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise StateLoadError(source, "expected a JSON object")
    return state_from_payload(payload, source=source)


def fetch_state(
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> LeagueState:
    """GET a league snapshot as JSON from ``url``."""

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout)
    try:
        resp = http.get(url)
        resp.raise_for_status()
        payload = resp.json()
    except httpx.HTTPStatusError as exc:
        raise StateLoadError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise StateLoadError(url, f"request failed: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StateLoadError(url, f"invalid JSON: {exc.msg}") from exc
    finally:
        if owns_client:
            http.close()
    if not isinstance(payload, dict):
        raise StateLoadError(url, "expected a JSON object")
    return state_from_payload(payload, source=url)
