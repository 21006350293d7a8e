from django.db import migrations

DEFAULT_CONTENT = """# Interactive MDX Showcase

Welcome to the **MDX Interactive Platform**! This editor supports real-time preview with custom shortcodes.

[interactivesection]
## Try Our Interactive Features

This section is automatically highlighted and animated when you wrap content in the interactive section shortcode.
[/interactivesection]

## Interactive Questions

[yesno-question question="Do you find this platform useful?"]

[yesno-question question="Would you like to learn more about MDX?"]

## Standard Markdown

You can still use regular markdown features:

- **Bold text**
- *Italic text*
- `Code snippets`
- [Links](https://example.com)"""


def create_default_document(apps, schema_editor):
    Document = apps.get_model("mdxengine", "Document")
    Document.objects.get_or_create(
        id="default",
        defaults={"title": "Interactive MDX Showcase", "content": DEFAULT_CONTENT},
    )


def remove_default_document(apps, schema_editor):
    Document = apps.get_model("mdxengine", "Document")
    Document.objects.filter(id="default").delete()


class Migration(migrations.Migration):

    dependencies = [
        ("mdxengine", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_default_document, remove_default_document),
    ]
