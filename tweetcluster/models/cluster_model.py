# cluster_model.py

from dataclasses import dataclass

from tweetcluster.models.tweet_model import TweetModel

@dataclass(frozen=True)
class ClusterMember:
    """클러스터에 배정된 트윗 1건과 그 트윗의 단어 존재 벡터"""
    tweet: TweetModel
    vector: dict[str, float]


# cluster_id(0부터 생성 순) -> 처리 순서대로 쌓인 멤버 목록
ClusterResult = dict[int, list[ClusterMember]]
