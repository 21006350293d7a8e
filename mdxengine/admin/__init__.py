"""
Django admin configuration for the mdxengine application.

- document: Document admin (with rendered preview) and QuestionResponse admin

All admin classes are automatically registered via @admin.register() decorators
in their respective modules.
"""

from django.conf import settings
from django.contrib import admin

# Customize admin site
admin.site.site_header = getattr(settings, 'ADMIN_SITE_HEADER', 'Django Administration')
admin.site.site_title = getattr(settings, 'ADMIN_SITE_TITLE', 'Django site admin')
admin.site.index_title = getattr(settings, 'ADMIN_INDEX_TITLE', 'Site administration')

# Import admin classes to ensure they're registered
from .document import DocumentAdmin, QuestionResponseAdmin

__all__ = [
    "DocumentAdmin",
    "QuestionResponseAdmin",
]
