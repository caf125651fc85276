"""In-memory repositories - isolation of stored state and uniqueness rules."""

import pytest

from eventdesk.domain.entities.event import Event
from eventdesk.domain.entities.review import Review
from eventdesk.domain.exceptions import ConflictError
from eventdesk.domain.value_objects import EventId, UserEmail
from eventdesk.infrastructure.persistence import (
    InMemoryEventRepository,
    InMemoryReviewRepository,
)
from fakes import ATTENDEE, ORGANIZER, in_days


def _event(days=7, title="Meetup") -> Event:
    return Event.create(
        title=title,
        description="",
        venue="Hall A",
        starts_at=in_days(days),
        capacity=10,
        organizer_email=UserEmail(ORGANIZER),
    )


def _review(event_id, email=ATTENDEE, rating=5) -> Review:
    return Review.create(
        event_id=event_id, rating=rating, comment="ok", author_email=UserEmail(email)
    )


@pytest.mark.asyncio
async def test_event_changes_require_save():
    repo = InMemoryEventRepository()
    event = _event()
    await repo.add(event)

    event.title = "Changed locally"
    loaded = await repo.get_by_id(event.id)
    assert loaded.title == "Meetup"

    loaded.cancel("rain")
    assert not (await repo.get_by_id(event.id)).is_cancelled

    await repo.save(loaded)
    assert (await repo.get_by_id(event.id)).is_cancelled


@pytest.mark.asyncio
async def test_event_add_twice_conflicts():
    repo = InMemoryEventRepository()
    event = _event()
    await repo.add(event)

    with pytest.raises(ConflictError):
        await repo.add(event)


@pytest.mark.asyncio
async def test_get_missing_event_returns_none():
    assert await InMemoryEventRepository().get_by_id(EventId.new()) is None


@pytest.mark.asyncio
async def test_event_list_sorted_by_start_and_limited():
    repo = InMemoryEventRepository()
    for days in (5, 1, 3):
        await repo.add(_event(days, title=f"day {days}"))

    events = await repo.list(limit=2)

    assert [event.title for event in events] == ["day 1", "day 3"]


@pytest.mark.asyncio
async def test_review_uniqueness_per_author_is_case_insensitive():
    repo = InMemoryReviewRepository()
    event_id = EventId.new()
    await repo.add(_review(event_id))

    assert await repo.exists_for_author(event_id, UserEmail(ATTENDEE.upper()))
    with pytest.raises(ConflictError):
        await repo.add(_review(event_id, email=ATTENDEE.upper()))


@pytest.mark.asyncio
async def test_same_author_may_review_different_events():
    repo = InMemoryReviewRepository()
    first, second = EventId.new(), EventId.new()

    await repo.add(_review(first))
    await repo.add(_review(second))

    assert len(await repo.list_by_event(first)) == 1
    assert len(await repo.list_by_event(second)) == 1


@pytest.mark.asyncio
async def test_get_review_by_id_returns_copy():
    repo = InMemoryReviewRepository()
    review = _review(EventId.new())
    await repo.add(review)

    loaded = await repo.get_by_id(review.id)
    loaded.comment = "edited"

    assert (await repo.get_by_id(review.id)).comment == "ok"
