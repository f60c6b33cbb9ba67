# config/__init__.py

import os
from dotenv import load_dotenv

# .env 로드 (없으면 환경변수만 사용)
load_dotenv()

# [Twitter API 설정]
# key/secret이 있으면 bearer token을 새로 발급받고, 없으면 TWITTER_BEARER_TOKEN을 그대로 쓴다
TWITTER_KEY = os.getenv("TWITTER_KEY")
TWITTER_SECRET = os.getenv("TWITTER_SECRET")
TWITTER_BEARER_TOKEN = os.getenv("TWITTER_BEARER_TOKEN")

TWITTER_AUTH_URL = "https://api.twitter.com/oauth2/token"
TWITTER_SEARCH_URL = "https://api.twitter.com/1.1/search/tweets.json"

REQUEST_TIMEOUT = 10

# 검색 1회당 받아올 트윗 수 (v1.1 search API는 100이 MAX)
SEARCH_COUNT = 100

# [유사도 설정]
# cosine similarity가 이 값을 "초과"해야 기존 클러스터에 합류한다.
# 값이 높을수록 거의 같은 트윗만 묶이고 클러스터 수가 늘어난다.
SIMILARITY_THRESHOLD = 0.5

# [저장소 설정]
OUTPUT_ROOT = "outputs/"
LOG_DIR = "logs"

# CSV 저장 시 컬럼 순서
RESULT_COLUMNS = [
    "cluster_id", "screen_name", "created_at", "favorite_count", "text",
]
