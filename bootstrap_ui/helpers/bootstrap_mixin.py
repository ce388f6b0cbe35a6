# bootstrap_ui/helpers/bootstrap_mixin.py
"""
Class and option utilities shared by the Bootstrap helpers.

This mixin provides:
1. CSS class merging for option dictionaries
2. Bootstrap button classes derived from ``bootstrap-type`` / ``bootstrap-size``
3. A check for associative (keyed) containers
4. "Easy icon" expansion of ``i:icon-name`` tokens inside titles

The mixin expects ``self.config(key, default)`` from ``Helper``.
"""

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import conditional_escape

logger = logging.getLogger(__name__)

# An icon token: "i:name", alone or surrounded by whitespace
ICON_TOKEN_RE = re.compile(r"(^|\s+)i:([a-zA-Z0-9\-_]+)(\s+|$)")

# Unanchored: any "btn-xxx" class (btn-block included) counts as a type class
BUTTON_TYPE_RE = re.compile(r"btn-[a-z]+")


def _split_classes(value) -> list[str]:
    """Normalise a class input (string, sequence of strings or None) to a token list."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.strip().split()
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        tokens = list(value)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(
                    f"class names must be strings, not {type(token).__name__}"
                )
        return tokens
    raise TypeError(
        f"class must be a string or a sequence of strings, not {type(value).__name__}"
    )


class ClassOptionsHelper:
    """
    Mixin for helpers that render Bootstrap markup.

    Args:
        easy_icon: Enable ``i:name`` expansion. Defaults to the
            ``easy_icon`` setting.
        icon_renderer: Callable returning the markup for an icon name.
    """

    def __init__(
        self,
        *args,
        easy_icon: bool | None = None,
        icon_renderer: Callable[[str], str] | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        if easy_icon is None:
            easy_icon = bool(self.config("easy_icon", True))
        self._easy_icon = easy_icon
        self._icon_renderer = icon_renderer

    @property
    def easy_icon(self) -> bool:
        return self._easy_icon

    def add_class(self, options: dict | None = None, class_input=None, key: str = "class") -> dict:
        """
        Add the given class(es) to the element options.

        Existing classes come first, then the new ones. Tokens are trimmed,
        de-duplicated (first occurrence wins) and empty tokens dropped.

        Args:
            options: Options/attributes to add a class to (not modified)
            class_input: Class names, a space separated string or a
                sequence of strings
            key: Option key holding the classes

        Returns:
            A new options dict with ``key`` set or updated
        """
        options = dict(options or {})
        tokens = _split_classes(options.get(key)) + _split_classes(class_input)

        classes = []
        for token in tokens:
            token = token.strip()
            if token and token not in classes:
                classes.append(token)

        options[key] = " ".join(classes)
        return options

    def derive_button_classes(self, options: dict | None = None) -> dict:
        """
        Add ``btn`` and ``btn-*`` classes according to ``bootstrap-type`` and
        ``bootstrap-size``.

        The type class is skipped when the classes already contain anything
        matching ``btn-[a-z]+``, so a caller supplied ``btn-block`` also
        suppresses it.

        An explicit ``"bootstrap-type": None`` also falls back to the
        configured default type.
        """
        options = dict(options or {})
        button_type = options.pop("bootstrap-type", None)
        if button_type is None:
            button_type = self.config("buttons.type", "default")
        size = options.pop("bootstrap-size", False)

        options = self.add_class(options, "btn")
        if not BUTTON_TYPE_RE.search(options["class"]):
            options = self.add_class(options, f"btn-{button_type}")
        if size:
            options = self.add_class(options, f"btn-{size}")
        return options

    @staticmethod
    def is_associative_mapping(value: Any) -> bool:
        """
        Check whether ``value`` is keyed data rather than a plain list.

        Sequences are never associative. A mapping is associative unless its
        keys are exactly ``0..len - 1`` in order. An empty mapping is not
        associative, unlike the PHP array check this mirrors.
        """
        if not isinstance(value, Mapping):
            return False
        return list(value.keys()) != list(range(len(value)))

    def convert_icon_tokens(self, text: str) -> tuple[str, bool]:
        """
        Replace ``i:icon-name`` tokens in ``text`` with icon markup.

        Surrounding whitespace is kept. Nothing is matched when easy icon is
        disabled.

        Returns:
            The converted text and whether at least one token was replaced

        Raises:
            ImproperlyConfigured: if a token is found but no icon renderer
                was given
        """
        if not self._easy_icon:
            return text, False

        def _replace(match):
            if self._icon_renderer is None:
                raise ImproperlyConfigured(
                    f"{type(self).__name__} has no icon renderer to expand 'i:{match.group(2)}'"
                )
            return match.group(1) + str(self._icon_renderer(match.group(2))) + match.group(3)

        text, count = ICON_TOKEN_RE.subn(_replace, text)
        if count:
            logger.debug(f"Expanded {count} icon token(s)")
        return text, bool(count)

    @staticmethod
    def escape_title(title, options: dict):
        """
        Escape ``title`` ahead of icon expansion unless the caller set ``escape``.

        Icon tokens survive escaping unchanged, so only the inserted icon
        markup ends up unescaped.
        """
        if "escape" in options:
            return title
        return conditional_escape(title)

    def with_icon_expansion(self, render_fn: Callable[[str, dict], Any], title: str, options: dict | None = None):
        """
        Call ``render_fn(title, options)`` after icon expansion of ``title``.

        When an icon was inserted, ``escape`` defaults to ``False`` so the
        markup survives rendering. An explicit ``escape`` is left alone.
        """
        options = dict(options or {})
        title, converted = self.convert_icon_tokens(title)
        if converted:
            options.setdefault("escape", False)
        return render_fn(title, options)
