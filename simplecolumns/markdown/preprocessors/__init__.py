# simplecolumns/markdown/preprocessors/__init__.py

# Import other preprocessors
from .column_tag_escaper import column_tag_escaper_default

PREPROCESSORS = [
    column_tag_escaper_default,  # Keep [begin]/[col]/[end] literal through pandoc
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
