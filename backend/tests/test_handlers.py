"""Handlers - state-dependent rules of each request kind, exercised via dispatch."""

import uuid

import pytest

from eventdesk.application.commands.events import CancelEventCommand
from eventdesk.application.dto.event import EventDTO
from eventdesk.application.dto.review import ReviewDTO
from eventdesk.application.queries.events import GetEventQuery, GetEventsListQuery
from eventdesk.application.queries.reviews import ListReviewsQuery
from eventdesk.domain.entities.event import EventStatus
from eventdesk.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
)
from fakes import ATTENDEE, ORGANIZER, in_days, make_create_event, make_create_review


async def _event(dispatcher, **overrides) -> str:
    event_id = await dispatcher.dispatch(make_create_event(**overrides))
    return event_id.value


# ==================== CREATE EVENT ====================


@pytest.mark.asyncio
async def test_create_event_stores_and_notifies_organizer(dispatcher, notifier):
    event_id = await _event(dispatcher, title="  Padded title  ")

    event = await dispatcher.dispatch(GetEventQuery(event_id=event_id))

    assert isinstance(event, EventDTO)
    assert event.title == "Padded title"
    assert event.status == EventStatus.SCHEDULED.value
    assert [m.subject for m in notifier.messages] == ["Your event is scheduled"]
    assert str(notifier.messages[0].recipient) == ORGANIZER


# ==================== CANCEL EVENT ====================


@pytest.mark.asyncio
async def test_cancel_event_notifies_organizer_and_each_reviewer_once(
    dispatcher, notifier, calls
):
    event_id = await _event(dispatcher)
    await dispatcher.dispatch(make_create_review(event_id))
    await dispatcher.dispatch(
        make_create_review(event_id, author_email="second@example.com", rating=3)
    )
    notifier.messages.clear()
    calls.clear()

    event = await dispatcher.dispatch(
        CancelEventCommand(event_id=event_id, requested_by=ORGANIZER, reason=" rain ")
    )

    assert event.status == EventStatus.CANCELLED.value
    assert event.cancellation_reason == "rain"
    assert calls == ["events.save", "email.send", "email.send", "email.send"]
    assert [str(m.recipient) for m in notifier.messages] == [
        ORGANIZER,
        ATTENDEE,
        "second@example.com",
    ]
    assert all(m.subject == "Event cancelled" for m in notifier.messages)
    assert "Reason: rain" in notifier.messages[0].body


@pytest.mark.asyncio
async def test_cancel_event_by_other_user_is_denied(dispatcher, calls):
    event_id = await _event(dispatcher)
    calls.clear()

    with pytest.raises(AccessDeniedError):
        await dispatcher.dispatch(
            CancelEventCommand(event_id=event_id, requested_by=ATTENDEE)
        )
    assert calls == []


@pytest.mark.asyncio
async def test_cancel_event_organizer_match_ignores_case(dispatcher):
    event_id = await _event(dispatcher)

    event = await dispatcher.dispatch(
        CancelEventCommand(event_id=event_id, requested_by=ORGANIZER.upper())
    )

    assert event.status == EventStatus.CANCELLED.value
    assert event.cancellation_reason is None


@pytest.mark.asyncio
async def test_cancel_event_without_reason(dispatcher):
    event_id = await _event(dispatcher)

    event = await dispatcher.dispatch(
        CancelEventCommand(event_id=event_id, requested_by=ORGANIZER, reason=None)
    )

    assert event.status == EventStatus.CANCELLED.value
    assert event.cancellation_reason is None


@pytest.mark.asyncio
async def test_cancel_event_twice_conflicts(dispatcher, notifier):
    event_id = await _event(dispatcher)
    command = CancelEventCommand(event_id=event_id, requested_by=ORGANIZER)
    await dispatcher.dispatch(command)
    notifier.messages.clear()

    with pytest.raises(ConflictError):
        await dispatcher.dispatch(command)
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_cancel_unknown_event_is_not_found(dispatcher):
    with pytest.raises(EntityNotFoundError):
        await dispatcher.dispatch(
            CancelEventCommand(event_id=str(uuid.uuid4()), requested_by=ORGANIZER)
        )


# ==================== CREATE REVIEW ====================


@pytest.mark.asyncio
async def test_review_for_unknown_event_is_not_found(dispatcher, calls):
    with pytest.raises(EntityNotFoundError):
        await dispatcher.dispatch(make_create_review(str(uuid.uuid4())))
    assert "reviews.add" not in calls


@pytest.mark.asyncio
async def test_review_for_cancelled_event_conflicts(dispatcher):
    event_id = await _event(dispatcher)
    await dispatcher.dispatch(
        CancelEventCommand(event_id=event_id, requested_by=ORGANIZER)
    )

    with pytest.raises(ConflictError):
        await dispatcher.dispatch(make_create_review(event_id))


@pytest.mark.asyncio
async def test_second_review_by_same_author_conflicts(dispatcher, calls):
    event_id = await _event(dispatcher)
    await dispatcher.dispatch(make_create_review(event_id))
    calls.clear()

    with pytest.raises(ConflictError):
        await dispatcher.dispatch(
            make_create_review(event_id, author_email=ATTENDEE.upper())
        )
    assert calls == ["reviews.exists_for_author"]


# ==================== QUERIES ====================


@pytest.mark.asyncio
async def test_list_reviews_oldest_first(dispatcher):
    event_id = await _event(dispatcher)
    await dispatcher.dispatch(make_create_review(event_id, rating=4))
    await dispatcher.dispatch(
        make_create_review(event_id, author_email="late@example.com", rating=2)
    )

    reviews = await dispatcher.dispatch(ListReviewsQuery(event_id=event_id))

    assert all(isinstance(review, ReviewDTO) for review in reviews)
    assert [review.rating for review in reviews] == [4, 2]


@pytest.mark.asyncio
async def test_list_reviews_for_unknown_event_is_not_found(dispatcher):
    with pytest.raises(EntityNotFoundError):
        await dispatcher.dispatch(ListReviewsQuery(event_id=str(uuid.uuid4())))


@pytest.mark.asyncio
async def test_get_unknown_event_is_not_found(dispatcher):
    missing = str(uuid.uuid4())

    with pytest.raises(EntityNotFoundError) as exc_info:
        await dispatcher.dispatch(GetEventQuery(event_id=missing))

    assert exc_info.value.entity == "Event"
    assert exc_info.value.entity_id == missing


@pytest.mark.asyncio
async def test_events_list_excludes_cancelled_unless_asked(dispatcher):
    kept = await _event(dispatcher, title="Kept", starts_at=in_days(2))
    dropped = await _event(dispatcher, title="Dropped", starts_at=in_days(1))
    await dispatcher.dispatch(
        CancelEventCommand(event_id=dropped, requested_by=ORGANIZER)
    )

    default = await dispatcher.dispatch(GetEventsListQuery())
    everything = await dispatcher.dispatch(GetEventsListQuery(include_cancelled=True))

    assert [event.id for event in default] == [kept]
    assert [event.id for event in everything] == [dropped, kept]


@pytest.mark.asyncio
async def test_events_list_honours_limit(dispatcher):
    for days in range(1, 6):
        await _event(dispatcher, starts_at=in_days(days))

    events = await dispatcher.dispatch(GetEventsListQuery(limit=2))

    assert len(events) == 2
    assert events[0].starts_at < events[1].starts_at
