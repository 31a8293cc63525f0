# simplecolumns/markdown/postprocessors/__init__.py

from .columns_layout import columns_layout_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    columns_layout_default,  # Stitch [begin]/[col]/[end] blocks into flex columns
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
