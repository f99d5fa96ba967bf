"""Builders for test tweets, pages and sentiment results."""

from typing import List

from tweet_sentiment.models.dtos import PageMeta, SentimentResult, TimelinePage, Tweet


def make_tweets(start: int, count: int) -> List[Tweet]:
    """Tweets with consecutive numeric ids starting at `start`."""
    return [Tweet(id=str(i), text=f"tweet number {i}") for i in range(start, start + count)]


def make_page(tweets: List[Tweet], next_token=None) -> TimelinePage:
    meta = PageMeta(
        result_count=len(tweets),
        newest_id=tweets[0].id if tweets else None,
        oldest_id=tweets[-1].id if tweets else None,
        next_token=next_token,
    )
    return TimelinePage(data=tweets or None, meta=meta)


def make_result(tweet_id: str, label: str = "positive") -> SentimentResult:
    scores = {"positive": 0.0, "neutral": 0.0, "negative": 0.0}
    if label in scores:
        scores[label] = 1.0
    else:
        scores.update(positive=0.5, negative=0.5)
    return SentimentResult.model_validate(
        {
            "id": tweet_id,
            "sentiment": label,
            "confidenceScores": scores,
            "sentences": [
                {
                    "sentiment": label if label != "mixed" else "neutral",
                    "confidenceScores": {"positive": 0.6, "neutral": 0.3, "negative": 0.1},
                    "offset": 0,
                    "length": 12,
                    "text": "tweet number",
                }
            ],
        }
    )
