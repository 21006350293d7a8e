import uuid

import django.db.models.deletion
from django.db import migrations, models

import mdxengine.models.document


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Document",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "id",
                    models.CharField(
                        default=mdxengine.models.document.generate_document_id,
                        editable=False,
                        help_text="Document id; also scopes question widgets and their responses",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=200)),
                (
                    "content",
                    models.TextField(
                        blank=True,
                        help_text="MDX source: markdown plus [yesno-question] and [interactivesection] shortcodes",
                    ),
                ),
            ],
            options={
                "verbose_name": "Document",
                "verbose_name_plural": "Documents",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="QuestionResponse",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "question_id",
                    models.CharField(
                        db_index=True,
                        help_text="Widget id within the document (q1, q2, ...)",
                        max_length=32,
                    ),
                ),
                (
                    "response",
                    models.CharField(choices=[("yes", "Yes"), ("no", "No")], max_length=3),
                ),
                ("session_id", models.CharField(blank=True, max_length=64, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "document",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="responses",
                        to="mdxengine.document",
                    ),
                ),
            ],
            options={
                "verbose_name": "Question response",
                "verbose_name_plural": "Question responses",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["document", "question_id"],
                        name="response_question_idx",
                    )
                ],
            },
        ),
    ]
