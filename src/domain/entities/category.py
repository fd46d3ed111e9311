from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """카탈로그 카테고리.

    image_id는 Blob Store('category' 네임스페이스)의 에셋을 가리키며
    생성 시 한 번만 설정된다.
    """

    title: str
    description: str
    image_id: str

    id: Optional[int] = None
