# similarity.py

import numpy as np

class DimensionMismatchError(ValueError):
    """서로 다른 vocabulary로 만든 벡터를 비교하려 할 때"""

    def __init__(self, left_size, right_size, missing=None):
        self.left_size = left_size
        self.right_size = right_size
        self.missing = sorted(missing or [])[:5]
        super().__init__(
            f"Vector keys do not match ({left_size} vs {right_size} dims)"
            + (f" (e.g. {self.missing})" if self.missing else "")
        )


def cosine_similarity(a: dict[str, float], b: dict[str, float]) -> float:
    """
    같은 key 집합을 가진 두 벡터의 cosine similarity.
    - key 집합이 다르면 DimensionMismatchError (잘라내거나 채우지 않는다)
    - 한쪽이라도 영벡터면 0.0
    """
    if a.keys() != b.keys():
        raise DimensionMismatchError(len(a), len(b), a.keys() ^ b.keys())

    keys = list(a)
    x = np.fromiter((a[k] for k in keys), dtype=float, count=len(keys))
    y = np.fromiter((b[k] for k in keys), dtype=float, count=len(keys))

    norm_product = float(x @ x) * float(y @ y)
    if norm_product == 0.0:
        return 0.0

    # 0/1 벡터에서 sqrt(|a|^2 * |b|^2)로 한 번에 나눠야 경계값(0.5 등)이 정확히 나온다
    sim = float(x @ y) / np.sqrt(norm_product)
    return float(np.clip(sim, 0.0, 1.0))
