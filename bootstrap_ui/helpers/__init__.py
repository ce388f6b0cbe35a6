# bootstrap_ui/helpers/__init__.py

from .bootstrap_mixin import ClassOptionsHelper
from .form import FormHelper
from .html import HtmlHelper

__all__ = ("ClassOptionsHelper", "FormHelper", "HtmlHelper")
