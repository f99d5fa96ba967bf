"""
Tweet sentiment sync.

Fetches new tweets for a user, scores them with a text-analytics service and
persists the enriched results, resuming from the newest persisted tweet.
"""

__version__ = "0.1.0"
