# search_model.py

from dataclasses import dataclass, field

from tweetcluster.models.tweet_model import TweetModel

@dataclass(frozen=True)
class SearchMetadata:
    completed_in: float = 0.0
    max_id: int = 0
    query: str = ""
    refresh_url: str = ""
    count: int = 0
    since_id: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "SearchMetadata":
        data = data or {}
        return cls(
            completed_in=float(data.get("completed_in") or 0.0),
            max_id=int(data.get("max_id") or 0),
            query=data.get("query", ""),
            refresh_url=data.get("refresh_url", ""),
            count=int(data.get("count") or 0),
            since_id=int(data.get("since_id") or 0),
        )


@dataclass(frozen=True)
class SearchResult:
    tweets: list[TweetModel] = field(default_factory=list)
    metadata: SearchMetadata = field(default_factory=SearchMetadata)
