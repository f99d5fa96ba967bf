from .twitter_client import TwitterClient

__all__ = ["TwitterClient"]
