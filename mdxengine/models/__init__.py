"""
Models for the mdxengine app.

This package contains all model definitions organized by domain:
- base: Base models and mixins (TimeStampedModel)
- document: MDX documents (Document)
- response: Yes/no question responses (QuestionResponse, ResponseTally)
"""

# Base models and mixins
from .base import TimeStampedModel

# Document models
from .document import Document, generate_document_id

# Response models
from .response import (
    QuestionResponse,
    QuestionResponseManager,
    QuestionResponseQuerySet,
    ResponseTally,
)

__all__ = [
    # Base
    "TimeStampedModel",
    # Document
    "Document",
    "generate_document_id",
    # Response
    "QuestionResponse",
    "QuestionResponseManager",
    "QuestionResponseQuerySet",
    "ResponseTally",
]
