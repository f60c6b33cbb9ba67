# greedy_tweet_clusterer.py

import sys
from typing import Sequence

from tweetcluster.config import SIMILARITY_THRESHOLD
from tweetcluster.models.cluster_model import ClusterMember, ClusterResult
from tweetcluster.models.tweet_model import TweetModel
from tweetcluster.processors.similarity import cosine_similarity
from tweetcluster.processors.tweet_vectorizer import vectorize
from tweetcluster.processors.vocabulary_builder import build_vocabulary

class GreedyTweetClusterer:
    """
    트윗 배치를 단어 존재 벡터 + cosine similarity로 묶는 객체

    규칙:
    - 트윗은 입력 순서대로 하나씩 처리한다
    - cluster_id 오름차순, 멤버는 들어온 순서대로 비교한다
    - threshold를 "초과"하는 멤버가 처음 나오면 그 클러스터에 넣고 바로 멈춘다 (best-match 아님)
    - 아무 데도 안 맞으면 다음 번호로 새 클러스터를 만든다
    - 한번 만든 클러스터는 합치거나 나누지 않는다 -> 입력 순서가 바뀌면 결과도 바뀔 수 있다
    """

    def __init__(self, threshold: float = SIMILARITY_THRESHOLD):
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ValueError(f"threshold는 숫자여야 합니다: {threshold!r}")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold는 0.0 ~ 1.0 사이여야 합니다: {threshold}")
        self.threshold = float(threshold)

    def cluster(self, tweets: Sequence[TweetModel]) -> ClusterResult:
        # vocabulary / result / 클러스터 개수 모두 이 호출 안에서만 산다
        vocabulary = build_vocabulary(tweets)
        result: ClusterResult = {}

        for tweet in tweets:
            member = ClusterMember(tweet=tweet, vector=vectorize(vocabulary, tweet))
            cluster_id = self._find_cluster(result, member.vector)
            if cluster_id is None:
                cluster_id = len(result)
                result[cluster_id] = []
            result[cluster_id].append(member)

        return result

    def _find_cluster(self, result: ClusterResult, vector: dict[str, float]) -> int | None:
        for cluster_id in sorted(result):
            for member in result[cluster_id]:
                # DimensionMismatchError는 잡지 않는다 (벡터 생성 버그 -> 실행 전체 중단)
                if cosine_similarity(member.vector, vector) > self.threshold:
                    return cluster_id
        return None

    def process(self, tweets: Sequence[TweetModel]):
        """클러스터링 + 통계. 진행 로그는 stderr로만 찍는다 (stdout은 결과 출력용)"""
        if not tweets:
            print("[Cluster] 데이터가 비어 있어 클러스터링을 건너뜁니다.", file=sys.stderr)
            return {}, self.summarize({})

        result = self.cluster(tweets)
        stats = self.summarize(result)

        print(
            f"[Cluster] total={stats['fetched']}, "
            f"clusters={stats['clusters']}, "
            f"largest={stats['largest_cluster']} "
            f"(threshold={self.threshold})",
            file=sys.stderr,
        )
        return result, stats

    @staticmethod
    def summarize(result: ClusterResult) -> dict:
        sizes = [len(members) for members in result.values()]
        return {
            "fetched": sum(sizes),
            "clusters": len(result),
            "largest_cluster": max(sizes) if sizes else 0,
            "singletons": sum(1 for s in sizes if s == 1),
        }
