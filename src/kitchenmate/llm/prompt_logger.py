"""
KitchenMate - Prompt Logger.

Writes each LLM call to prompt_logs/<run>/NN_<task>.md for inspection.
Enabled via KITCHENMATE_LOG_PROMPTS=1 or the --log-prompts CLI flag.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from kitchenmate.config import settings

LOG_DIR = Path("prompt_logs")

# None = follow KITCHENMATE_LOG_PROMPTS
_enabled_override: bool | None = None

_run_started: str | None = None
_calls = 0


def enable_prompt_logging(enabled: bool = True) -> None:
    global _enabled_override
    _enabled_override = enabled


def is_enabled() -> bool:
    if _enabled_override is not None:
        return _enabled_override
    return bool(settings.kitchenmate_log_prompts)


def _run_dir() -> Path:
    global _run_started
    if _run_started is None:
        _run_started = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = LOG_DIR / _run_started
    path.mkdir(parents=True, exist_ok=True)
    return path


def _format_response(response: Any, error: str | None) -> str:
    if error:
        return f"**ERROR:** {error}"
    if response is None:
        return "(no response)"
    if hasattr(response, "model_dump"):
        response = response.model_dump()
    return f"```json\n{json.dumps(response, indent=2, default=str)}\n```"


def log_prompt(
    *,
    task: str,
    model: str,
    system_prompt: str,
    user_prompt: str,
    response_model: str,
    response: Any = None,
    error: str | None = None,
    config: dict | None = None,
) -> Path | None:
    """
    Record one LLM call as markdown.

    Returns the file written, or None when logging is off.
    """
    if not is_enabled():
        return None

    global _calls
    _calls += 1

    header = [
        f"# {task}",
        "",
        f"**Time:** {datetime.now().isoformat()}",
        f"**Model:** {model} -> {response_model}",
    ]
    if config and "temperature" in config:
        header.append(f"**Temperature:** {config['temperature']}")

    sections = [
        "\n".join(header),
        f"## System\n\n```\n{system_prompt}\n```",
        f"## User\n\n```\n{user_prompt}\n```",
        f"## Response\n\n{_format_response(response, error)}",
    ]

    path = _run_dir() / f"{_calls:02d}_{task}.md"
    path.write_text("\n\n".join(sections) + "\n", encoding="utf-8")
    return path


def get_session_log_dir() -> Path | None:
    """Directory for this run's logs, if logging is on."""
    return _run_dir() if is_enabled() else None


def reset_session() -> None:
    """Start a fresh run directory and hand enablement back to the environment."""
    global _run_started, _calls, _enabled_override
    _run_started = None
    _calls = 0
    _enabled_override = None
