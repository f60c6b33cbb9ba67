"""
Configuration file for pytest.

This file adds the project's root directory to the Python path so that
pytest can find the 'tweetcluster' package without needing to install it.
"""

import sys
from pathlib import Path

import pytest

# Add the project root directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tweetcluster.models.tweet_model import TweetModel  # noqa: E402


@pytest.fixture
def make_tweets():
    """Builds TweetModel objects from plain texts, numbering the authors."""

    def _make(texts):
        return [
            TweetModel(
                text=text,
                screen_name=f"user{i}",
                created_at=f"Mon Jan 0{i % 9 + 1} 10:00:00 +0000 2024",
                favorite_count=i,
            )
            for i, text in enumerate(texts)
        ]

    return _make
