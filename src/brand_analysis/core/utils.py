from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional, Protocol, Tuple


class RandomSource(Protocol):
    """產生 [0, bound) 均勻整數的亂數來源。"""

    def below(self, bound: int) -> int:
        ...


class SystemRandomSource:
    """以 random.Random 實作的亂數來源，可指定 seed 以重現結果。"""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def below(self, bound: int) -> int:
        return self._random.randrange(bound)


class SequenceRandomSource:
    """依序回傳預先指定數值的亂數來源，供測試使用。"""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)

    def below(self, bound: int) -> int:
        try:
            value = next(self._values)
        except StopIteration as exc:
            raise ValueError("預設亂數序列已用盡") from exc
        if not 0 <= value < bound:
            raise ValueError(f"預設亂數 {value} 不在 [0, {bound}) 範圍內")
        return value


def split_asset_name(asset_name: str) -> Tuple[str, str]:
    """將資產名稱轉小寫後以 "." 切出名稱與 TLD。

    只取前兩段："my.brand.io" 會得到 ("my", "brand")；沒有 "." 時 TLD 為空字串。
    """

    parts = asset_name.lower().split(".")
    name = parts[0]
    tld = parts[1] if len(parts) > 1 else ""
    return name, tld


def name_length(name: str) -> int:
    """以 UTF-16 編碼單位計算長度，與瀏覽器端 JavaScript 的 length 一致。"""

    return len(name.encode("utf-16-le")) // 2
