"""Structured event logger built on the standard logging module."""

from __future__ import annotations

import logging
import os

_EVENT_NAME_WIDTH = 32


class EventLogger:
    """Emit ``domain_action`` events with catalog-rendered human text.

    No handlers are attached here; the application decides where records go
    (see :class:`consolation.logging_config.LoggerConfigurator`).
    """

    def __init__(self, name: str = "consolation") -> None:
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES

            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                kwargs.setdefault("derived", True)
        msg = (
            self._build_debug_message(event_name, human_text, kwargs)
            if self._is_debug_enabled()
            else human_text
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _build_debug_message(
        event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        # Pad / truncate event name to a fixed column for alignment
        if len(event_name) <= _EVENT_NAME_WIDTH:
            ev = event_name.ljust(_EVENT_NAME_WIDTH)
        else:
            ev = event_name[: _EVENT_NAME_WIDTH - 1] + "…"
        base = f"{ev} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = EventLogger()
