# bootstrap_ui/helpers/form.py
"""Form helper rendering Bootstrap buttons."""

import logging

from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

from .base import Helper
from .bootstrap_mixin import ClassOptionsHelper
from .html import HtmlHelper

logger = logging.getLogger(__name__)


class FormHelper(ClassOptionsHelper, Helper):
    """
    Render ``<button>`` and submit inputs with Bootstrap classes.

    Icons in button titles are rendered by ``html`` (an ``HtmlHelper``
    sharing this helper's configuration when not given).
    """

    def __init__(self, config=None, html: HtmlHelper | None = None, **kwargs):
        self.html = html or HtmlHelper(config=config)
        kwargs.setdefault("icon_renderer", self.html.icon)
        super().__init__(config=config, **kwargs)

    def button(self, title: str, options: dict | None = None):
        """
        Render a button.

        Usage:
            form.button("i:floppy-disk Save", {"bootstrap-type": "primary"})

        ``bootstrap-type`` and ``bootstrap-size`` select the ``btn-*``
        classes, ``type`` defaults to ``"button"``.
        """
        options = dict(options or {})
        options.setdefault("type", "button")
        options = self.derive_button_classes(options)
        title = self.escape_title(title, options)
        return self.with_icon_expansion(self._render_button, title, options)

    def submit(self, caption: str | None = None, options: dict | None = None):
        """Render ``<input type="submit">``. Icons cannot live inside ``value``."""
        if caption is None:
            caption = "Submit"
        options = self.derive_button_classes(options)
        options["type"] = "submit"
        options["value"] = caption
        logger.debug(f"Rendering submit input '{caption}'")
        return format_html("<input{}>", mark_safe(self.render_attrs(options)))

    def _render_button(self, title, options: dict):
        if options.get("escape", True) is False:
            content = mark_safe(title)
        else:
            content = conditional_escape(title)
        return format_html(
            "<button{}>{}</button>", mark_safe(self.render_attrs(options)), content
        )
