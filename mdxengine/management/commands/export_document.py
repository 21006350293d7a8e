"""
Management command to export MDX documents.

Writes the standalone HTML page (widgets and activation script included) or
the raw MDX source, to stdout, a file, or one file per document.
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from mdxengine.exports import EXPORT_FORMATS, export_document
from mdxengine.models import Document


class Command(BaseCommand):
    help = 'Export MDX documents as standalone HTML pages or raw MDX source'

    def add_arguments(self, parser):
        parser.add_argument(
            'document_id',
            nargs='?',
            help='ID of the document to export',
        )
        parser.add_argument(
            '--format',
            choices=EXPORT_FORMATS,
            default='html',
            help='Export format (default: html)',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='File to write (single document) or directory (--all); defaults to stdout',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Export every document into the --output directory',
        )

    def handle(self, *args, **options):
        document_id = options.get('document_id')
        export_format = options.get('format')
        output = options.get('output')
        export_all = options.get('all')

        if export_all:
            if document_id:
                raise CommandError('Pass either a document id or --all, not both')
            if not output:
                raise CommandError('--all requires --output DIRECTORY')
            self._export_all(Path(output), export_format)
            return

        if not document_id:
            raise CommandError('A document id is required (or use --all)')

        try:
            document = Document.objects.get(pk=document_id)
        except Document.DoesNotExist:
            raise CommandError(f'Document "{document_id}" does not exist')

        filename, text = export_document(document, export_format)
        if not output:
            self.stdout.write(text)
            return

        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
        self.stdout.write(self.style.SUCCESS(f'Exported "{document.title}" to {path}'))

    def _export_all(self, directory, export_format):
        directory.mkdir(parents=True, exist_ok=True)
        count = 0
        used = set()
        for document in Document.objects.order_by('created_at'):
            filename, text = export_document(document, export_format)
            # Titles are not unique; fall back to the id on collisions
            if filename in used:
                filename = f'{document.pk}.{export_format}'
            used.add(filename)
            (directory / filename).write_text(text, encoding='utf-8')
            count += 1

        self.stdout.write(
            self.style.SUCCESS(f'Exported {count} document(s) to {directory}')
        )
