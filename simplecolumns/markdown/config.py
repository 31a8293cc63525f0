# simplecolumns/markdown/config.py

PANDOC_EXTENSIONS = [
    "autolink_bare_uris",
    "strikeout",
    "superscript",
    "subscript",
    "task_lists",
    "smart",
    "pipe_tables",
    "grid_tables",
    "definition_lists",
    "footnotes",
    "fenced_code_blocks",
    "fenced_code_attributes",
    "raw_html",
    "fancy_lists",
    "tex_math_dollars",
    # Lines of one paragraph must stay separate lines for the column tags
    "hard_line_breaks",
]


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    ``hard_line_breaks`` turns every newline inside a paragraph into <br />,
    which is what lets a [col] tag written on its own line split a paragraph.
    ``implicit_header_references`` stays off so a heading named "Begin" or
    "End" cannot turn a column tag into a link.
    """
    return {
        "format": "markdown+" + "+".join(PANDOC_EXTENSIONS)
        + "-implicit_header_references",
        "extra_args": [
            # Math rendering with MathJax
            "--mathjax",
            # Keep pandoc from re-wrapping long lines
            "--wrap=none",
        ],
    }
