"""
Storage boundary

The processor only needs insert(...) -> bool, where False means the store
refused the record (duplicate or storage error). The list endpoint reads
all() in insertion order. GifticonStore describes that contract;
InMemoryGifticonStore is the implementation used by the API process and
the tests.
"""

import threading
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from loguru import logger

from giftguard.extractor.code_extractor import is_code_found


class GifticonStore(Protocol):
    def insert(
        self,
        item_name: str,
        merchant: str,
        expiry_ymd: str,
        source_ref: Optional[str],
        code: str,
        memo: str,
    ) -> bool:
        ...

    def all(self) -> List["StoredGifticon"]:
        ...


@dataclass(frozen=True)
class StoredGifticon:
    id: int
    item_name: str
    merchant: str
    expiry_date: str
    source_ref: Optional[str]
    code: str
    memo: str
    created_at: str

    def to_dict(self) -> Dict:
        return asdict(self)


class InMemoryGifticonStore:
    """
    Process-local gifticon store.

    A record is rejected as a duplicate when its source_ref or its real
    redemption code is already stored. The code-not-found sentinel is never
    a duplicate key.
    """

    def __init__(self):
        self._rows: List[StoredGifticon] = []
        self._lock = threading.Lock()

    def insert(
        self,
        item_name: str,
        merchant: str,
        expiry_ymd: str,
        source_ref: Optional[str],
        code: str,
        memo: str = "",
    ) -> bool:
        with self._lock:
            for row in self._rows:
                if source_ref and row.source_ref == source_ref:
                    logger.warning(f"Duplicate gifticon source rejected: {source_ref}")
                    return False
                if is_code_found(code) and row.code == code:
                    logger.warning(f"Duplicate gifticon code rejected: {code}")
                    return False

            row = StoredGifticon(
                id=len(self._rows) + 1,
                item_name=item_name,
                merchant=merchant,
                expiry_date=expiry_ymd,
                source_ref=source_ref,
                code=code,
                memo=memo,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            self._rows.append(row)

        logger.info(f"Stored gifticon #{row.id}: {item_name} ({merchant}) until {expiry_ymd}")
        return True

    def all(self) -> List[StoredGifticon]:
        with self._lock:
            return list(self._rows)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
