# pipeline.py
# 검색 → 클러스터링 → 출력(→ CSV) 파이프라인

import sys

from tweetcluster.config import LOG_DIR, OUTPUT_ROOT, SEARCH_COUNT, SIMILARITY_THRESHOLD
from tweetcluster.processors.greedy_tweet_clusterer import GreedyTweetClusterer
from tweetcluster.utils.logger import PipelineLogger
from tweetcluster.utils.result_printer import print_result, save_result_csv

def run_search_pipeline(
    query: str,
    client,
    threshold: float = SIMILARITY_THRESHOLD,
    stream=None,
    save_csv: bool = False,
    count: int = SEARCH_COUNT,
    log_dir: str = LOG_DIR,
    output_root: str = OUTPUT_ROOT,
):
    """
    client는 search(query, count) -> SearchResult 를 가진 객체면 된다.
    예외는 여기서 삼키지 않는다. 실패 단계만 로그에 남기고 호출자에게 그대로 올린다.
    """
    logger = PipelineLogger(log_dir=log_dir, module_name="pipeline_search")
    print(f"\n{'='*20} [{query}] pipeline start {'='*20}", file=sys.stderr)

    pipeline_stats = {
        "query": query,
        "fetched": 0,
        "clusters": 0,
        "largest_cluster": 0,
        "csv_path": None,
        "status": "initialized",
    }

    clusterer = GreedyTweetClusterer(threshold=threshold)

    try:
        # STEP 1: 검색
        logger.start_step("search", 1, metadata={"query": query, "count": count})
        search_result = client.search(query, count=count)
        logger.end_step(result_count=len(search_result.tweets))

        # STEP 2: 클러스터링
        logger.start_step("cluster", 2, metadata={"threshold": clusterer.threshold})
        result, stats = clusterer.process(search_result.tweets)
        logger.add_metric("clusters", stats["clusters"])
        logger.add_metric("largest_cluster", stats["largest_cluster"])
        logger.end_step(result_count=stats["clusters"])

        # STEP 3: 출력
        print_result(result, stream=stream)

        # STEP 4: CSV 저장 (선택)
        if save_csv:
            logger.start_step("save_csv", 4)
            pipeline_stats["csv_path"] = save_result_csv(result, query, base_path=output_root)
            logger.end_step(result_count=stats["fetched"])

        pipeline_stats.update(
            fetched=stats["fetched"],
            clusters=stats["clusters"],
            largest_cluster=stats["largest_cluster"],
            status="success",
        )
        logger.save()

    except Exception as e:
        logger.end_step(error=str(e))
        logger.save()
        raise

    return pipeline_stats
