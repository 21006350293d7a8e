from django.views.generic import DetailView

from .models import Document


class DocumentDetailView(DetailView):
    """
    Standalone page for one document, as shared with readers.

    Uses the same page as the HTML export, so widgets on it are live and
    post their responses to the API.
    """

    model = Document
    pk_url_kwarg = "document_id"
    template_name = "mdxengine/export.html"
    context_object_name = "document"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        document = self.object
        context["title"] = document.export_title()
        context["body"] = document.render_html()
        return context
