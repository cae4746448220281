"""Services package for the delivery charge calculator."""

from .delivery_charge import (
    get_charge_calculator,
    get_rate_strategy,
    available_zones,
    ChargeCalculator,
    RateStrategy,
    BaseRateStrategy,
    UrbanRateStrategy,
    SuburbanRateStrategy,
    RuralRateStrategy,
    StrategyNotSetError
)

__all__ = [
    'get_charge_calculator',
    'get_rate_strategy',
    'available_zones',
    'ChargeCalculator',
    'RateStrategy',
    'BaseRateStrategy',
    'UrbanRateStrategy',
    'SuburbanRateStrategy',
    'RuralRateStrategy',
    'StrategyNotSetError'
]
