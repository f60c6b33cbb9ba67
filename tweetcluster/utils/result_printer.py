# utils/result_printer.py
# 클러스터 결과 출력 / CSV 저장

import os
import re
import sys
from datetime import datetime

import pandas as pd

from tweetcluster.config import OUTPUT_ROOT, RESULT_COLUMNS
from tweetcluster.models.cluster_model import ClusterResult

def format_result_lines(result: ClusterResult) -> list[str]:
    """
    cluster_id 오름차순으로 트윗 1건당 1줄:
        <cluster_id>\t<screen_name>\t<created_at>\t<text>
    본문의 줄바꿈은 공백으로 바꾸고, 클러스터가 끝날 때마다 "#" 한 줄로 구분한다
    """
    lines = []
    for cluster_id in sorted(result):
        for member in result[cluster_id]:
            tweet = member.tweet
            text = tweet.text.replace("\n", " ")
            lines.append(f"{cluster_id}\t{tweet.screen_name}\t{tweet.created_at}\t{text}")
        lines.append("#")
    return lines


def print_result(result: ClusterResult, stream=None):
    stream = stream or sys.stdout
    for line in format_result_lines(result):
        stream.write(line + "\n")


def result_to_frame(result: ClusterResult) -> pd.DataFrame:
    rows = []
    for cluster_id in sorted(result):
        for member in result[cluster_id]:
            row = member.tweet.to_dict()
            row["cluster_id"] = cluster_id
            rows.append(row)

    if not rows:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame(rows)[RESULT_COLUMNS]


def save_result_csv(result: ClusterResult, query: str, base_path=OUTPUT_ROOT):
    """<base_path>/<query>/clusters_<timestamp>.csv 로 저장하고 경로를 반환. 결과가 없으면 None"""
    if not result:
        return None

    df = result_to_frame(result)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # 해시태그/공백/슬래시 등은 폴더명으로 못 쓰므로 치환
    folder = re.sub(r"[^\w\-]+", "_", query).strip("_") or "query"
    out_dir = os.path.join(base_path, folder)
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"clusters_{timestamp}.csv")
    df.to_csv(path, index=False, encoding="utf-8-sig")
    return path
