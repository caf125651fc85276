"""
Reviews API Router - nested under /events/{event_id}/reviews.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from eventdesk.application.commands.reviews import CreateReviewCommand
from eventdesk.application.dispatcher import Dispatcher
from eventdesk.application.dto.review import ReviewDTO
from eventdesk.application.queries.reviews import ListReviewsQuery

logger = getLogger(__name__)

router = APIRouter(prefix="/events/{event_id}/reviews", tags=["reviews"])


class CreateReviewRequest(BaseModel):
    rating: int
    comment: str = ""
    author_email: str
    author_phone: Optional[str] = None


class CreateReviewResponse(BaseModel):
    id: str


class ListReviewsResponse(BaseModel):
    reviews: list[ReviewDTO]
    total: int
    average_rating: Optional[float] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateReviewResponse)
@inject
async def create_review(
    event_id: str, body: CreateReviewRequest, dispatcher: FromDishka[Dispatcher]
) -> CreateReviewResponse:
    review_id = await dispatcher.dispatch(
        CreateReviewCommand(event_id=event_id, **body.model_dump())
    )
    return CreateReviewResponse(id=review_id.value)


@router.get("", response_model=ListReviewsResponse)
@inject
async def list_reviews(
    event_id: str, dispatcher: FromDishka[Dispatcher]
) -> ListReviewsResponse:
    reviews = await dispatcher.dispatch(ListReviewsQuery(event_id=event_id))
    average = (
        round(sum(review.rating for review in reviews) / len(reviews), 2)
        if reviews
        else None
    )
    return ListReviewsResponse(reviews=reviews, total=len(reviews), average_rating=average)
