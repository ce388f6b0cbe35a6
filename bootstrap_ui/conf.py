"""
Settings access for the bootstrap_ui app.

Projects override any of the defaults below through a nested
``BOOTSTRAP_UI`` dict in their Django settings, e.g.::

    BOOTSTRAP_UI = {
        "buttons": {"type": "primary"},
        "easy_icon": False,
    }

Values are looked up with dotted keys (``"buttons.type"``).
"""

import copy
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

_MISSING = object()

DEFAULTS = {
    # Expand "i:name" tokens in button and label titles
    "easy_icon": True,
    "buttons": {
        "type": "default",
    },
    "labels": {
        "type": "default",
    },
    "icon": {
        "tag": "i",
        "prefix": "glyphicon",
    },
}


def merge_config(base, overrides):
    """Return a deep copy of ``base`` with ``overrides`` merged on top."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_settings() -> dict:
    """
    Return the effective configuration tree.

    Read on every call so that ``override_settings`` takes effect in tests.
    """
    return merge_config(DEFAULTS, getattr(settings, "BOOTSTRAP_UI", None))


def lookup(tree: dict, key: str, default=_MISSING):
    """
    Resolve a dotted ``key`` inside a nested dict.

    Args:
        tree: Nested configuration dict
        key: Dotted path such as ``"buttons.type"``
        default: Returned when the path does not exist

    Returns:
        The configured value

    Raises:
        ImproperlyConfigured: if the path is missing and no default is given
    """
    node = tree
    for part in key.split("."):
        try:
            node = node[part]
        except (KeyError, TypeError):
            if default is _MISSING:
                raise ImproperlyConfigured(
                    f"Unknown bootstrap_ui setting '{key}'"
                ) from None
            logger.debug(f"Setting '{key}' not found, using default {default!r}")
            return default
    return node


def get_config(key: str, default=_MISSING):
    """Look up ``key`` in ``settings.BOOTSTRAP_UI`` merged over ``DEFAULTS``."""
    return lookup(get_settings(), key, default)
