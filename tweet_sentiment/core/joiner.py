from collections import defaultdict
from typing import Dict, Iterable, List

from tweet_sentiment.models.dtos import EnrichedTweet, SentimentResult, Tweet


def join(
    records: Iterable[Tweet],
    results: Iterable[SentimentResult],
    record_type: str = "tweet",
) -> List[EnrichedTweet]:
    """
    Inner join of tweets and sentiment results on id.

    Tweets without a result produce nothing. A tweet matching several results
    produces one enriched record per result. Output follows tweet order.
    """
    by_id: Dict[str, List[SentimentResult]] = defaultdict(list)
    for result in results:
        by_id[result.id].append(result)

    enriched = []
    for record in records:
        for result in by_id.get(record.id, ()):
            enriched.append(
                EnrichedTweet(id=record.id, text=record.text, sentiment=result, record_type=record_type)
            )
    return enriched
