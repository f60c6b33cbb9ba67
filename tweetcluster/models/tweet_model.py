# tweet_model.py

from dataclasses import dataclass, field, asdict
from datetime import datetime
import pytz

@dataclass(frozen=True)
class TweetModel:
    text: str
    screen_name: str = ""
    created_at: str = ""   # API 원본 문자열 그대로 (클러스터링에서는 보지 않는다)
    favorite_count: int = 0
    user_id: int | None = None
    user_name: str = ""

    # 수집 시각(collected_at)은 UTC 기준 ISO 8601로 저장
    collected_at: str = field(
        default_factory=lambda: datetime.now(pytz.utc).isoformat()
    )

    @classmethod
    def from_api(cls, item: dict, text: str | None = None) -> "TweetModel":
        """search API의 status 하나를 모델로 변환. text를 주면 원문 대신 사용한다"""
        user = item.get("user") or {}
        return cls(
            text=item.get("text", "") if text is None else text,
            screen_name=user.get("screen_name", ""),
            created_at=item.get("created_at", ""),
            favorite_count=int(item.get("favorite_count") or 0),
            user_id=user.get("id"),
            user_name=user.get("name", ""),
        )

    def to_dict(self):
        """객체를 딕셔너리로 변환 (Pandas DataFrame 생성용)"""
        return asdict(self)
