"""BaseService — abstract foundation for all lemonctl services.

Every service receives a :class:`Stand` at construction time. The Stand
provides serialized, transactional access to the drawer database.
Services own their transaction boundaries via ``self._stand.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lemonctl.infrastructure.stand import Stand


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class OrderService(BaseService):
            def process_orders(self, orders) -> ServiceResult:
                with self._stand.transaction() as store:
                    ...
    """

    def __init__(self, stand: Stand) -> None:
        self._stand = stand
