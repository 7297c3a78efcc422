"""Tests for the Tutorial schemas."""

from datetime import datetime, timedelta, timezone

from models import Tutorial, TutorialCreate, TutorialRead, TutorialUpdate


def test_read_defaults():
    tutorial = TutorialRead()
    assert tutorial.id is None
    assert tutorial.title == ""
    assert tutorial.description == ""
    assert tutorial.published is False


def test_read_partial_data_keeps_other_defaults():
    tutorial = TutorialRead(title="Custom Title", published=True)
    assert tutorial.title == "Custom Title"
    assert tutorial.published is True
    assert tutorial.description == ""
    assert tutorial.id is None


def test_read_null_values_fall_back_to_defaults():
    tutorial = TutorialRead.model_validate(
        {"title": None, "description": "Defined Description", "published": None}
    )
    assert tutorial.title == ""
    assert tutorial.description == "Defined Description"
    assert tutorial.published is False


def test_read_from_api_json():
    tutorial = TutorialRead.model_validate(
        {
            "id": "json-1",
            "title": "JSON Tutorial",
            "description": "From JSON data",
            "published": False,
            "created_at": "2024-01-02T03:04:05",
            "updated_at": "2024-01-02T03:04:05",
        }
    )
    assert tutorial.id == "json-1"
    assert tutorial.created_at.year == 2024


def test_read_keeps_special_characters():
    tutorial = TutorialRead(title="Tutorial @#$%^&*()", description='Description with <html> & "quotes"')
    assert "@#$%^&*()" in tutorial.title
    assert '<html> & "quotes"' in tutorial.description


def test_table_model_generates_distinct_ids():
    first = Tutorial(title="One")
    second = Tutorial(title="Two")
    assert first.id != second.id
    assert len(first.id) == 32
    assert first.published is False


def test_update_tracks_only_set_fields():
    update = TutorialUpdate(title="New")
    assert update.model_dump(exclude_unset=True) == {"title": "New"}


def test_read_marks_naive_timestamps_as_utc():
    tutorial = TutorialRead(created_at=datetime(2024, 1, 2, 3, 4, 5), updated_at=None)
    assert tutorial.created_at.tzinfo is timezone.utc
    assert tutorial.updated_at is None


def test_table_model_timestamps_are_aware():
    tutorial = Tutorial(title="Now")
    assert tutorial.created_at.utcoffset() == timedelta(0)
    assert tutorial.updated_at.utcoffset() == timedelta(0)


def test_create_accepts_missing_title():
    assert TutorialCreate(description="x").title is None
