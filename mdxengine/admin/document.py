"""Admin configuration for documents and question responses."""

from django.contrib import admin
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from mdxengine.markdown.postprocessors import sanitize_html
from mdxengine.models import Document, QuestionResponse


class QuestionResponseInline(admin.TabularInline):
    """Read-only list of the responses collected by a document's widgets."""

    model = QuestionResponse
    extra = 0
    can_delete = False
    fields = ["question_id", "response", "session_id", "created_at"]
    readonly_fields = fields
    ordering = ["question_id", "created_at"]


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    """Admin for MDX documents."""

    list_display = ["title", "id", "question_count", "section_count", "updated_at"]
    search_fields = ["id", "title", "content"]
    readonly_fields = ["id", "rendered_preview", "created_at", "updated_at"]
    ordering = ["-updated_at"]
    inlines = [QuestionResponseInline]

    fieldsets = [
        (
            None,
            {
                "fields": ["id", "title"],
            },
        ),
        (
            "Content",
            {
                "fields": ["content", "rendered_preview"],
                "description": "Write content in MDX. The preview is rendered on every view.",
            },
        ),
        (
            "Metadata",
            {
                "fields": ["created_at", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    @admin.display(description="Questions")
    def question_count(self, obj):
        return obj.shortcode_counts()["yesno-question"]

    @admin.display(description="Sections")
    def section_count(self, obj):
        return obj.shortcode_counts()["interactivesection"]

    @admin.display(description="Preview")
    def rendered_preview(self, obj):
        if obj._state.adding or not obj.content:
            return "-"
        # Sanitized: the admin should not execute document markup
        fragment = obj.render_preview()
        html = sanitize_html(fragment.html, {"sanitize": True})
        return format_html('<div class="mdx-admin-preview">{}</div>', mark_safe(html))


@admin.register(QuestionResponse)
class QuestionResponseAdmin(admin.ModelAdmin):
    """Admin for individual yes/no responses."""

    list_display = ["document", "question_id", "response", "session_id", "created_at"]
    list_filter = ["response", "document"]
    search_fields = ["question_id", "session_id", "document__title"]
    readonly_fields = ["id", "created_at"]
    ordering = ["-created_at"]
