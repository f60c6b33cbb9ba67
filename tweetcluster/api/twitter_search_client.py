# twitter_search_client.py
import base64

from tweetcluster.api.base_client import BaseAPIClient, TwitterAPIError
from tweetcluster.config import (
    REQUEST_TIMEOUT,
    SEARCH_COUNT,
    TWITTER_AUTH_URL,
    TWITTER_SEARCH_URL,
)
from tweetcluster.models.search_model import SearchMetadata, SearchResult
from tweetcluster.models.tweet_model import TweetModel
from tweetcluster.utils.text_normalizer import normalize_html_text

def get_basic_token(key: str, secret: str) -> str:
    credential = f"{key}:{secret}"
    return base64.b64encode(credential.encode("utf-8")).decode("ascii")


class TwitterSearchClient(BaseAPIClient):
    """Twitter search API(v1.1) 클라이언트
    - 무상태
    - 클러스터링 / 저장 없음
    - API → SearchResult 반환만 담당 (statuses 순서 유지)
    """

    def __init__(self, bearer_token, search_url=TWITTER_SEARCH_URL, timeout=REQUEST_TIMEOUT):
        super().__init__("Twitter", bearer_token, search_url, timeout=timeout)

    @classmethod
    def from_credentials(cls, key, secret, auth_url=TWITTER_AUTH_URL, **kwargs):
        """API key/secret으로 bearer token을 발급받아 클라이언트를 만든다"""
        return cls(get_bearer_token(key, secret, auth_url=auth_url), **kwargs)

    def search(self, query: str, count: int = SEARCH_COUNT) -> SearchResult:
        if not query:
            raise ValueError("검색어(query)는 비어 있을 수 없습니다.")

        data = self.get_json(
            self.base_url,
            headers={"Authorization": f"Bearer {self.api_key}"},
            q=query,
            count=count,
        )

        tweets = [
            TweetModel.from_api(item, text=normalize_html_text(item.get("text", "")))
            for item in data.get("statuses", [])
        ]
        metadata = SearchMetadata.from_api(data.get("search_metadata"))
        return SearchResult(tweets=tweets, metadata=metadata)


def get_bearer_token(key, secret, auth_url=TWITTER_AUTH_URL, timeout=REQUEST_TIMEOUT) -> str:
    if not key or not secret:
        raise ValueError("[Twitter] API key와 secret은 필수입니다.")

    client = BaseAPIClient("Twitter OAuth2", get_basic_token(key, secret), auth_url, timeout=timeout)
    data = client.post_form(
        auth_url,
        data={"grant_type": "client_credentials"},
        headers={
            "Authorization": f"Basic {client.api_key}",
            "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
        },
    )

    token = data.get("access_token")
    if not token:
        raise TwitterAPIError("[Twitter OAuth2] 응답에 access_token이 없습니다.", status_code=200)
    return token
