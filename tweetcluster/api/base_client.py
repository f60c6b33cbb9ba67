# base_client.py
# A base API client class for making HTTP requests and parsing JSON responses.

import requests

from tweetcluster.config import REQUEST_TIMEOUT

class TwitterAPIError(RuntimeError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class BaseAPIClient:
    def __init__(self, api_name, api_key, base_url, timeout=REQUEST_TIMEOUT):
        # --- 무결성 체크 ---
        if not api_key:
            raise ValueError(f"[{api_name}] API Key는 필수입니다. 빈 값을 넣을 수 없습니다.")
        if not base_url:
            raise ValueError(f"[{api_name}] Base URL이 정의되지 않았습니다.")
        self._api_name = api_name
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    @property
    def base_url(self):
        return self._base_url

    @property
    def api_key(self):
        return self._api_key

    def get_json(self, url, headers=None, **params):
        try:
            r = requests.get(url, params=params, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise TwitterAPIError(f"[{self._api_name}] 요청 실패: {e}") from e
        return self._parse(r)

    def post_form(self, url, data, headers=None):
        try:
            r = requests.post(url, data=data, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise TwitterAPIError(f"[{self._api_name}] 요청 실패: {e}") from e
        return self._parse(r)

    def _parse(self, r):
        if r.status_code != 200:
            raise TwitterAPIError(
                f"[{self._api_name}] status code가 200이 아닙니다: {r.status_code}",
                status_code=r.status_code,
            )
        try:
            return r.json()
        except ValueError as e:
            raise TwitterAPIError(
                f"[{self._api_name}] 응답 JSON 파싱 실패", status_code=r.status_code
            ) from e
