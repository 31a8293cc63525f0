"""
Management command to render a markdown document with column blocks.

Reads markdown from a file (or stdin with "-") and writes the rendered HTML
to stdout or to --output. Useful for checking how a note will lay out.
"""

import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from simplecolumns.markdown.postprocessors.columns_layout import columns_layout
from simplecolumns.markdown.renderer import render_markdown


class Command(BaseCommand):
    help = 'Render markdown containing [begin]/[col]/[end] blocks to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'source',
            help='Markdown file to render, or "-" to read from stdin',
        )
        parser.add_argument(
            '--output',
            '-o',
            type=str,
            help='Write the HTML to this file instead of stdout',
        )
        parser.add_argument(
            '--mobile',
            action='store_true',
            help='Render as if the page were viewed on a mobile device',
        )
        parser.add_argument(
            '--columns-only',
            action='store_true',
            help='Treat the input as rendered HTML and only apply the column layout',
        )

    def handle(self, *args, **options):
        source = options['source']
        output = options.get('output')
        context = {'is_mobile': options.get('mobile', False)}

        if source == '-':
            text = sys.stdin.read()
        else:
            path = Path(source)
            if not path.is_file():
                raise CommandError(f'No such file: {source}')
            text = path.read_text(encoding='utf-8')

        if options.get('columns_only'):
            html = columns_layout(text, context)
        else:
            html = render_markdown(text, context=context)

        if output:
            Path(output).write_text(html, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Wrote {output}'))
        else:
            self.stdout.write(html)
