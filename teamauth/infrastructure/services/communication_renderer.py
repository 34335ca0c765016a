"""Communication templates: render subject/content strings with Jinja."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template, TemplateError

from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class CommunicationTemplateRenderer:
    """Renders stored template strings against event params.

    Compiled templates are memoized by source; unknown params render empty.
    """

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env or Environment(autoescape=False)
        self._compiled: dict[str, Template] = {}

    def render(self, source: str | None, params: dict[str, Any]) -> str:
        """Render source with params. Raises jinja2.TemplateError on bad syntax."""
        if not source:
            return ""
        template = self._compiled.get(source)
        if template is None:
            try:
                template = self._env.from_string(source)
            except TemplateError:
                logger.exception("Invalid communication template: %r", source[:80])
                raise
            self._compiled[source] = template
        return template.render(**params)
