# bootstrap_ui/helpers/html.py
"""
HTML helper for Bootstrap components.

Renders icons, labels, badges and breadcrumbs. ``HtmlHelper.icon`` is also
the icon renderer used for "easy icon" expansion.
"""

from collections.abc import Mapping

from django.utils.html import conditional_escape, format_html, format_html_join
from django.utils.safestring import mark_safe

from .base import Helper
from .bootstrap_mixin import ClassOptionsHelper


def _content(text, options: dict):
    """Escape ``text`` unless the options say it already is markup."""
    if options.get("escape", True) is False:
        return mark_safe(text)
    return conditional_escape(text)


class HtmlHelper(ClassOptionsHelper, Helper):
    def __init__(self, config=None, **kwargs):
        kwargs.setdefault("icon_renderer", self.icon)
        super().__init__(config=config, **kwargs)

    def icon(self, name: str, options: dict | None = None):
        """
        Render an icon.

        Usage:
            helper.icon("star")
            -> <i aria-hidden="true" class="glyphicon glyphicon-star"></i>
        """
        tag = self.config("icon.tag", "i")
        prefix = self.config("icon.prefix", "glyphicon")

        options = dict(options or {})
        options.setdefault("aria-hidden", "true")
        classes = options.pop("class", None)
        options = self.add_class({"class": f"{prefix} {prefix}-{name}"}, classes) | options
        return format_html("<{}{}></{}>", tag, mark_safe(self.render_attrs(options)), tag)

    def label(self, text: str, type: str | None = None, options: dict | None = None):
        """Render a Bootstrap label, e.g. ``<span class="label label-info">New</span>``."""
        options = dict(options or {})
        if type is None:
            type = self.config("labels.type", "default")
        options = self.add_class(options, ["label", f"label-{type}"])
        return self.with_icon_expansion(self._span, self.escape_title(text, options), options)

    def badge(self, text, options: dict | None = None):
        options = self.add_class(options, "badge")
        return self.with_icon_expansion(self._span, self.escape_title(str(text), options), options)

    def breadcrumb(self, crumbs, options: dict | None = None):
        """
        Render a breadcrumb trail.

        Args:
            crumbs: Either a list of titles, or a mapping of title -> URL.
                A ``None`` URL renders the title without a link.
            options: Attributes for the ``<ol>`` element

        Returns:
            Safe HTML string. The last crumb is marked ``active``.
        """
        options = self.add_class(options, "breadcrumb")
        if self.is_associative_mapping(crumbs):
            items = list(crumbs.items())
        else:
            titles = crumbs.values() if isinstance(crumbs, Mapping) else crumbs
            items = [(title, None) for title in titles]

        rows = []
        for index, (title, url) in enumerate(items):
            title, converted = self.convert_icon_tokens(conditional_escape(str(title)))
            content = mark_safe(title) if converted else title
            if url is not None:
                content = format_html('<a href="{}">{}</a>', url, content)
            item_attrs = {"class": "active"} if index == len(items) - 1 else {}
            rows.append((mark_safe(self.render_attrs(item_attrs)), content))

        return format_html(
            "<ol{}>{}</ol>",
            mark_safe(self.render_attrs(options)),
            format_html_join("", "<li{}>{}</li>", rows),
        )

    def _span(self, text, options: dict):
        return format_html(
            "<span{}>{}</span>",
            mark_safe(self.render_attrs(options)),
            _content(text, options),
        )
