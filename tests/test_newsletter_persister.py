"""
Tests for the newsletter persister and the content envelope reader.

Run with: python -m pytest tests/test_newsletter_persister.py -v
"""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from app.models.newsletter_model import Newsletter
from app.schemas.newsletter_schema import NewsletterResponse, PlainText, parse_content
from app.utils.errors import PersistenceError
from app.utils.newsletter_persister import build_title, save_newsletter


class TestTitle:

    def test_title_format(self):
        assert build_title("Emma", date(2024, 3, 15)) == "Emma's Daily Discovery - 2024-03-15"

    def test_title_pads_month_and_day(self):
        assert build_title("Leo", date(2025, 1, 5)).endswith("2025-01-05")


class TestSaveNewsletter:

    def test_creates_row_with_envelope(self, db_session, child):
        newsletter = save_newsletter(db_session, child, "SCIENCE: ...", today=date(2024, 3, 15))

        assert newsletter.id is not None
        assert newsletter.child_id == child.id
        assert newsletter.title == "Emma's Daily Discovery - 2024-03-15"
        assert newsletter.content["text"] == "SCIENCE: ..."
        assert newsletter.content["type"] == "text"
        assert newsletter.created_at is not None
        assert newsletter.sent_at is None

    def test_text_is_stored_untouched(self, db_session, child):
        text = "<script>alert(1)</script>\n\n  spaced  \n"
        newsletter = save_newsletter(db_session, child, text)
        assert newsletter.content["text"] == text

    def test_uses_current_date_by_default(self, db_session, child, freeze_today):
        freeze_today(date(2024, 3, 15))
        newsletter = save_newsletter(db_session, child, "hello")
        assert newsletter.title == "Emma's Daily Discovery - 2024-03-15"

    def test_same_day_saves_create_distinct_rows(self, db_session, child):
        first = save_newsletter(db_session, child, "one", today=date(2024, 3, 15))
        second = save_newsletter(db_session, child, "two", today=date(2024, 3, 15))

        assert first.id != second.id
        assert first.title == second.title
        assert db_session.query(Newsletter).filter_by(child_id=child.id).count() == 2

    def test_storage_error_becomes_persistence_error(self, db_session, child, monkeypatch):
        def broken_commit():
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db_session, "commit", broken_commit)
        with pytest.raises(PersistenceError):
            save_newsletter(db_session, child, "lost text")


class TestContentEnvelope:

    def test_tagged_row(self):
        content = parse_content({"type": "text", "text": "hi"})
        assert isinstance(content, PlainText)
        assert content.text == "hi"

    def test_untagged_legacy_row_reads_as_plain_text(self):
        content = parse_content({"text": "old row"})
        assert isinstance(content, PlainText)
        assert content.text == "old row"

    def test_null_content_reads_as_empty_text(self):
        assert parse_content(None).text == ""

    def test_unknown_tag_is_rejected(self):
        with pytest.raises(ValueError):
            parse_content({"type": "sections", "sections": []})

    def test_response_schema_reads_legacy_rows(self, db_session, child):
        row = Newsletter(child_id=child.id, title="Emma's Daily Discovery - 2023-01-01",
                         content={"text": "legacy"})
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)

        response = NewsletterResponse.model_validate(row)
        assert response.content.text == "legacy"
        assert response.content.type == "text"
