import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, List, Optional

def _rating_of(review: Any) -> Any:
    if isinstance(review, Mapping):
        return review.get('rating')
    return getattr(review, 'rating', None)

def rating_value(rating: Any) -> Optional[float]:
    """Return the rating as a float, or None when it isn't a finite number."""
    # bool is a Real subclass but never a rating; Decimal is not registered as Real
    if isinstance(rating, bool) or not isinstance(rating, (Real, Decimal)):
        return None
    if isinstance(rating, Decimal):
        if not rating.is_finite():
            return None
    elif not math.isfinite(rating):
        return None
    return float(rating)

def valid_ratings(reviews: Iterable[Any]) -> List[float]:
    """Return the ratings that are finite numbers, in order."""
    ratings = []
    for review in reviews:
        rating = rating_value(_rating_of(review))
        if rating is not None:
            ratings.append(rating)
    return ratings

def average_rating(reviews: Iterable[Any]) -> float:
    """
    Mean rating over the reviews that carry a numeric rating.
    Reviews with a missing or malformed rating are skipped; with nothing left
    the average is 0.0.
    """
    ratings = valid_ratings(reviews)
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)
