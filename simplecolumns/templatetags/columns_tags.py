# simplecolumns/templatetags/columns_tags.py

from django import template
from django.utils.safestring import mark_safe

from simplecolumns.markdown.postprocessors.columns_layout import columns_layout
from simplecolumns.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="columns")
def columns_filter(value):
    """Lay out column blocks in HTML that was rendered elsewhere"""
    return mark_safe(columns_layout(str(value), {}))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes the request on so mobile rendering can be detected"""
    processor_context = {
        "request": context.get("request"),
    }
    return mark_safe(render_markdown(value, context=processor_context))
