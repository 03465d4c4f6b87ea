"""Ready-made configurations for the two checkout pages.

`ShopConfiguration` drives the donation widget on the checkout page and
`CheckoutSuccessConfiguration` drives the thank-you/share block on the order
success page. Both wire the default httpx transport and the Jinja view, so a
host only sets credentials and assigns page-specific variables.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from adapters.rest_client import HttpxRestTransport
from adapters.template_view import JinjaTemplateView
from core.config import SdkSettings
from core.configuration import BaseConfiguration
from core.domain.registry import ModelRegistry
from core.errors import TransportError
from core.interfaces.rest import RestTransport
from core.interfaces.view import TemplateView

logger = logging.getLogger(__name__)


@dataclass
class WidgetOptions:
    """Presentation defaults assigned to the view in `init()`."""

    theme: str = "light"
    color: str = "#00efa2"
    currency: str = "€"
    assets_base_url: str = "https://connect.elefunds.de/static"
    css_files: tuple[str, ...] = ("elefunds.min.css",)
    javascript_files: tuple[str, ...] = ("elefunds.min.js",)
    share_services: list[str] = field(default_factory=lambda: ["facebook", "twitter"])


class _TemplateConfiguration(BaseConfiguration):
    """Shared wiring: default transport + Jinja view seeded from settings."""

    default_template = "Shop"

    def __init__(
        self,
        settings: SdkSettings | None = None,
        *,
        options: WidgetOptions | None = None,
        rest: RestTransport | None = None,
        view: TemplateView | None = None,
        model_registry: ModelRegistry | None = None,
    ) -> None:
        self._settings = settings or SdkSettings()
        self.options = options or WidgetOptions()
        template_dirs = [self._settings.templates_dir] if self._settings.templates_dir else None
        super().__init__(
            rest=rest or HttpxRestTransport(self._settings),
            view=view or JinjaTemplateView(self.default_template, template_dirs=template_dirs),
            model_registry=model_registry,
        )

        self.apply_settings(self._settings)
        self.set_available_share_services(self.options.share_services)

    @classmethod
    def from_settings(cls, settings: SdkSettings | None = None, **kwargs: Any) -> "_TemplateConfiguration":
        """Transporte y vista por defecto se construyen con estos mismos settings."""

        return cls(settings, **kwargs)

    def _register_assets(self) -> None:
        view = self.get_view()
        base = self.options.assets_base_url.rstrip("/")
        add_css = getattr(view, "add_css_file", None)
        add_js = getattr(view, "add_javascript_file", None)
        if callable(add_css):
            for name in self.options.css_files:
                add_css(f"{base}/{name}")
        if callable(add_js):
            for name in self.options.javascript_files:
                add_js(f"{base}/{name}")

    def _assign_common(self) -> None:
        view = self.get_view()
        if view is None:
            return
        view.assign("countrycode", self.get_countrycode())
        view.assign("currency", self.options.currency)
        view.assign("skin", {"theme": self.options.theme, "color": self.options.color})
        self._register_assets()


class ShopConfiguration(_TemplateConfiguration):
    """Checkout page: pre-fetches receivers for the widget.

    A failed pre-fetch is logged and the widget renders without receivers,
    so the checkout itself never breaks because of the donation API.
    """

    default_template = "Shop"

    def init(self) -> None:
        self._assign_common()
        receivers: list[Any] = []
        try:
            receivers = self.facade.get_receivers()
        except TransportError as exc:
            logger.warning(
                "Could not fetch receivers: %s",
                exc,
                extra={"error_code": exc.code, "error_kind": exc.kind.value},
            )
        self.get_view().assign("receivers", receivers)


class CheckoutSuccessConfiguration(_TemplateConfiguration):
    """Order success page: share services for the thank-you block."""

    default_template = "CheckoutSuccess"

    def init(self) -> None:
        self._assign_common()
        self.get_view().assign("shareServices", self.get_available_share_services())


def settings_from_env_file(path: Path) -> SdkSettings:
    """Load settings from a specific `.env` file instead of the default lookup."""

    return SdkSettings(_env_file=str(path))
