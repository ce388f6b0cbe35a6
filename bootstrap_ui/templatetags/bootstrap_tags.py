# bootstrap_ui/templatetags/bootstrap_tags.py

from django import template
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from bootstrap_ui.helpers import FormHelper, HtmlHelper

register = template.Library()

"""
Django template tags for Bootstrap components.

Usage in templates:
1. Load the tags: {% load bootstrap_tags %}

2. Render components:
   {% bs_button "i:floppy-disk Save" bootstrap_type="primary" %}
   {% bs_icon "star" %}
   {{ "New"|easy_icon }}

Keyword arguments use underscores; they are passed to the helpers with
hyphens (bootstrap_type -> bootstrap-type, aria_label -> aria-label).
"""


def _options(kwargs):
    return {key.replace("_", "-"): value for key, value in kwargs.items()}


@register.simple_tag
def bs_icon(name, **kwargs):
    """{% bs_icon "star" class="text-warning" %}"""
    return HtmlHelper().icon(name, _options(kwargs))


@register.simple_tag
def bs_label(text, type=None, **kwargs):
    """{% bs_label "New" "success" %}"""
    return HtmlHelper().label(text, type, _options(kwargs))


@register.simple_tag
def bs_badge(text, **kwargs):
    return HtmlHelper().badge(text, _options(kwargs))


@register.simple_tag
def bs_breadcrumb(crumbs, **kwargs):
    """
    Render a breadcrumb from a list of titles or a dict of title -> URL:
    {% bs_breadcrumb crumbs %}
    """
    return HtmlHelper().breadcrumb(crumbs, _options(kwargs))


@register.simple_tag
def bs_button(title, **kwargs):
    """{% bs_button "i:trash Delete" bootstrap_type="danger" bootstrap_size="sm" %}"""
    return FormHelper().button(title, _options(kwargs))


@register.simple_tag
def bs_submit(caption=None, **kwargs):
    return FormHelper().submit(caption, _options(kwargs))


@register.filter(name="add_class")
def add_class_filter(value, classes):
    """Merge classes into a class string: {{ "btn"|add_class:"btn-lg btn" }}"""
    return HtmlHelper().add_class({"class": value}, classes)["class"]


@register.filter(name="easy_icon")
def easy_icon_filter(value):
    """Expand "i:name" tokens; the rest of the text is always escaped."""
    text, converted = HtmlHelper().convert_icon_tokens(conditional_escape(value))
    if converted:
        return mark_safe(text)
    return text
