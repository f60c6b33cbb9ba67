# vocabulary_builder.py

from typing import Iterable

from tweetcluster.models.tweet_model import TweetModel
from tweetcluster.utils.text_normalizer import tokenize

def build_vocabulary(tweets: Iterable[TweetModel]) -> dict[str, float]:
    """
    배치 전체 트윗에 등장한 모든 단어를 0.0으로 초기화한 사전을 만든다.
    - 배치의 첫 트윗도 포함한다
    - 실행마다 새로 만들어 반환한다 (전역 상태 없음)
    """
    vocabulary = {}
    for tweet in tweets:
        for word in tokenize(tweet.text):
            vocabulary[word] = 0.0
    return vocabulary
