"""
Responses to yes/no question widgets.

Nothing here enforces one response per session: the widget disables itself
after a click, but a client can always post again and every stored response
is counted.
"""

import uuid
from dataclasses import dataclass

from django.db import models
from django.db.models import Count, Q


@dataclass(frozen=True)
class ResponseTally:
    """Yes/no counts for one question of one document."""

    document_id: str
    question_id: str
    yes: int = 0
    no: int = 0

    @property
    def total(self):
        return self.yes + self.no

    def to_dict(self):
        return {"yes": self.yes, "no": self.no}


class QuestionResponseQuerySet(models.QuerySet):
    def for_question(self, document_id, question_id):
        return self.filter(document_id=document_id, question_id=question_id)


class QuestionResponseManager(models.Manager):
    def get_queryset(self):
        return QuestionResponseQuerySet(self.model, using=self._db)

    def for_question(self, document_id, question_id):
        return self.get_queryset().for_question(document_id, question_id)

    def record(self, document, question_id, response, session_id=None):
        """Store one response. Duplicates from the same session are kept."""
        return self.create(
            document=document,
            question_id=question_id,
            response=response,
            session_id=session_id or None,
        )

    def tally(self, document_id, question_id):
        counts = self.for_question(document_id, question_id).aggregate(
            yes=Count("pk", filter=Q(response=QuestionResponse.Answer.YES)),
            no=Count("pk", filter=Q(response=QuestionResponse.Answer.NO)),
        )
        return ResponseTally(
            document_id=document_id,
            question_id=question_id,
            yes=counts["yes"] or 0,
            no=counts["no"] or 0,
        )


class QuestionResponse(models.Model):
    """One click on a yes/no widget."""

    class Answer(models.TextChoices):
        YES = "yes", "Yes"
        NO = "no", "No"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    document = models.ForeignKey(
        "Document",
        on_delete=models.CASCADE,
        related_name="responses",
    )
    question_id = models.CharField(
        max_length=32,
        db_index=True,
        help_text="Widget id within the document (q1, q2, ...)",
    )
    response = models.CharField(max_length=3, choices=Answer.choices)
    session_id = models.CharField(max_length=64, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = QuestionResponseManager()

    class Meta:
        ordering = ["created_at"]
        indexes = [models.Index(fields=["document", "question_id"], name="response_question_idx")]
        verbose_name = "Question response"
        verbose_name_plural = "Question responses"

    def __str__(self):
        return f"{self.document_id}/{self.question_id}: {self.response}"

    def to_dict(self):
        return {
            "id": str(self.id),
            "documentId": self.document_id,
            "questionId": self.question_id,
            "response": self.response,
            "sessionId": self.session_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
