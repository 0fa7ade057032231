from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def create(self, payment: Payment) -> int:
        raise NotImplementedError

    def update(self, payment: Payment) -> bool:
        raise NotImplementedError

    def delete_by_id(self, payment_id: int) -> bool:
        raise NotImplementedError
