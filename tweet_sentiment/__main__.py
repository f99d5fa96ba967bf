import sys

from tweet_sentiment.main import main

if __name__ == "__main__":
    sys.exit(main())
