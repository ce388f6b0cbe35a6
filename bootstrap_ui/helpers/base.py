# bootstrap_ui/helpers/base.py
"""Shared plumbing for the view helpers: configuration and attribute rendering."""

from django.forms.utils import flatatt

from bootstrap_ui.conf import get_settings, lookup, merge_config

# Option keys consumed by the helpers, never rendered as HTML attributes
RESERVED_OPTIONS = ("bootstrap-type", "bootstrap-size", "escape")


def _expand_dotted(overrides: dict) -> dict:
    """Turn ``{"buttons.type": "primary"}`` into ``{"buttons": {"type": "primary"}}``."""
    tree = {}
    for key, value in overrides.items():
        node = tree
        *parents, leaf = key.split(".")
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return tree


class Helper:
    """
    Base class for helpers.

    ``config`` holds per-instance overrides, either nested dicts or dotted
    keys, applied on top of the project's ``BOOTSTRAP_UI`` setting.
    """

    def __init__(self, config=None):
        self._config_overrides = _expand_dotted(config or {})

    def config(self, key: str, default=None):
        tree = merge_config(get_settings(), self._config_overrides)
        return lookup(tree, key, default)

    @staticmethod
    def render_attrs(options: dict) -> str:
        """Render options as HTML attributes, skipping reserved and empty values."""
        attrs = {
            key: value
            for key, value in options.items()
            if key not in RESERVED_OPTIONS and value is not None and value is not False
        }
        return flatatt(attrs)
