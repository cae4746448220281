"""Delivery charge calculation service (Strategy pattern)."""

import logging
import threading
from typing import Dict, List, Optional, Protocol, runtime_checkable
from abc import ABC, abstractmethod

from app.models import Delivery, DeliveryWithCharge, DeliveryZone, ChargeResponse
from app.config import settings

logger = logging.getLogger(__name__)


class StrategyNotSetError(RuntimeError):
    """Raised when a charge is requested before any rate strategy is installed."""

    def __init__(self, message: str = "No rate strategy has been set on the calculator"):
        super().__init__(message)


@runtime_checkable
class RateStrategy(Protocol):
    """
    Interface for delivery rate strategies.
    Any object with a compute_charge(distance) -> float method qualifies.
    """

    def compute_charge(self, distance: float) -> float:
        """Compute the charge for a delivery of the given distance."""
        ...


class BaseRateStrategy(ABC):
    """Abstract base for linear rate strategies (charge = distance x multiplier)."""

    @property
    @abstractmethod
    def zone(self) -> DeliveryZone:
        """Rate tier this strategy implements."""
        pass

    @property
    @abstractmethod
    def multiplier(self) -> float:
        """Charge per unit of distance."""
        pass

    def compute_charge(self, distance: float) -> float:
        """
        Compute the charge for a delivery.

        Negative distances are not rejected here; callers at the
        API and CLI boundaries validate input.

        Args:
            distance: Delivery distance

        Returns:
            distance multiplied by the tier's rate
        """
        logger.info("%s delivery strategy", self.zone.value.capitalize())
        return distance * self.multiplier

    def __repr__(self):
        return f"<{self.__class__.__name__}(multiplier={self.multiplier})>"


class UrbanRateStrategy(BaseRateStrategy):
    """City-centre deliveries, charged at 10 per unit of distance."""
    zone = DeliveryZone.URBAN
    multiplier = 10.0


class SuburbanRateStrategy(BaseRateStrategy):
    """Suburban deliveries, charged at 15 per unit of distance."""
    zone = DeliveryZone.SUBURBAN
    multiplier = 15.0


class RuralRateStrategy(BaseRateStrategy):
    """Rural deliveries, charged at 20 per unit of distance."""
    zone = DeliveryZone.RURAL
    multiplier = 20.0


# Strategies are stateless, so one shared instance per tier is enough
_RATE_STRATEGIES: Dict[DeliveryZone, BaseRateStrategy] = {
    DeliveryZone.URBAN: UrbanRateStrategy(),
    DeliveryZone.SUBURBAN: SuburbanRateStrategy(),
    DeliveryZone.RURAL: RuralRateStrategy(),
}


def get_rate_strategy(zone) -> BaseRateStrategy:
    """
    Look up the shared strategy for a rate tier.

    Args:
        zone: DeliveryZone or its string value (case-insensitive)

    Raises:
        ValueError: If the zone is not a known tier
    """
    if not isinstance(zone, DeliveryZone):
        zone = DeliveryZone(str(zone).strip().lower())
    return _RATE_STRATEGIES[zone]


def available_zones() -> List[DeliveryZone]:
    """List the rate tiers in ascending order of multiplier."""
    return sorted(_RATE_STRATEGIES, key=lambda z: _RATE_STRATEGIES[z].multiplier)


class ChargeCalculator:
    """
    Context object holding the active rate strategy.
    The strategy reference is guarded by a lock so that swaps and
    calculations from different threads see a consistent strategy.
    """

    def __init__(self, strategy: Optional[RateStrategy] = None):
        self._lock = threading.Lock()
        self._strategy: Optional[RateStrategy] = None
        if strategy is not None:
            self.set_strategy(strategy)

    @property
    def strategy(self) -> Optional[RateStrategy]:
        with self._lock:
            return self._strategy

    def has_strategy(self) -> bool:
        return self.strategy is not None

    def set_strategy(self, strategy: RateStrategy) -> None:
        """Replace the active strategy unconditionally."""
        logger.info("ChargeCalculator strategy set to %s", strategy.__class__.__name__)
        with self._lock:
            self._strategy = strategy

    def _require_strategy(self) -> RateStrategy:
        strategy = self.strategy
        if strategy is None:
            raise StrategyNotSetError()
        return strategy

    def calculate_charge(self, distance: float) -> float:
        """
        Calculate a delivery charge with the active strategy.

        Raises:
            StrategyNotSetError: If set_strategy has not been called
        """
        return self._require_strategy().compute_charge(distance)

    def calculate_all_charges(self, deliveries: List[Delivery]) -> ChargeResponse:
        """
        Calculate charges for a batch of deliveries.
        The whole batch is charged with the strategy active when the call starts.
        """
        strategy = self._require_strategy()

        deliveries_with_charge = []
        total_charge = 0.0

        for idx, delivery in enumerate(deliveries, 1):
            charge = strategy.compute_charge(delivery.distance)
            deliveries_with_charge.append(
                DeliveryWithCharge(
                    distance=delivery.distance,
                    charge=charge,
                    delivery_id=idx
                )
            )
            total_charge += charge

        return ChargeResponse(
            zone=getattr(strategy, "zone", None),
            deliveries=deliveries_with_charge,
            total_charge=round(total_charge, 2),
            delivery_count=len(deliveries)
        )


# Singleton instance for the default calculator
_default_calculator: Optional[ChargeCalculator] = None


def get_charge_calculator() -> ChargeCalculator:
    """
    Get the process-wide calculator (Singleton pattern).
    Pre-loaded with DEFAULT_DELIVERY_ZONE when that setting names a valid tier.
    """
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = ChargeCalculator()
        default_zone = settings.DEFAULT_DELIVERY_ZONE
        if default_zone:
            try:
                _default_calculator.set_strategy(get_rate_strategy(default_zone))
            except ValueError:
                logger.warning("Ignoring unknown DEFAULT_DELIVERY_ZONE %r", default_zone)
    return _default_calculator
