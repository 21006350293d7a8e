# mdxengine/templatetags/mdx_tags.py

from django import template
from django.utils.safestring import mark_safe

from mdxengine.markdown import count_shortcodes, render, render_document

register = template.Library()


@register.filter(name="mdx")
def mdx_filter(value, document_id):
    """Render MDX source with its activation script: {{ doc.content|mdx:doc.pk }}"""
    return mark_safe(render(value or "", str(document_id)))


@register.simple_tag
def mdx_preview(value, document_id, sanitize=False):
    """Render MDX without the activation script, e.g. for admin previews"""
    context = {"sanitize": True} if sanitize else None
    fragment = render_document(value or "", str(document_id), context=context)
    return mark_safe(fragment.html)


@register.filter(name="shortcode_count")
def shortcode_count_filter(value, kind=None):
    """Number of shortcodes in the source, optionally of one kind"""
    counts = count_shortcodes(value or "")
    if kind:
        return counts.get(kind, 0)
    return sum(counts.values())
