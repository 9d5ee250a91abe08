"""JSON-file-backed implementation of DiscountPolicyRepository.

The file is re-read on every query so edits made by the admin side are
visible to the next price calculation.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.discount_policy import DiscountPolicy
from storefront.domain.model.value_objects import DiscountRate
from storefront.domain.repository.discount_policy_repository import (
    DiscountPolicyRepository,
)


class JsonDiscountPolicyRepository(DiscountPolicyRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- DiscountPolicyRepository interface -----------------------------------

    def list_by_group(self, group: str) -> list[DiscountPolicy]:
        return [p for p in self.list_all() if p.group == group]

    def list_all(self) -> list[DiscountPolicy]:
        return sorted(self._load(), key=lambda p: (p.group, p.min_quantity))

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[DiscountPolicy]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [
            DiscountPolicy(
                id=str(item["id"]),
                group=item["group"],
                min_quantity=int(item["min_quantity"]),
                max_quantity=(
                    int(item["max_quantity"])
                    if item.get("max_quantity") is not None
                    else None
                ),
                rate=DiscountRate.of(item["rate"]),
            )
            for item in raw
        ]

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
