"""Demonstration of swapping rate strategies on one calculator."""

from app.services import (
    ChargeCalculator,
    RuralRateStrategy,
    SuburbanRateStrategy,
    UrbanRateStrategy
)

DEMO_DISTANCE = 5


def run_demo(distance: float = DEMO_DISTANCE):
    """Charge the same distance under each tier and print the results."""
    calculator = ChargeCalculator()

    # Urban delivery: 50.0 for distance 5
    calculator.set_strategy(UrbanRateStrategy())
    print(f"Urban Charge: {calculator.calculate_charge(distance)}")

    # Suburban delivery: 75.0 for distance 5
    calculator.set_strategy(SuburbanRateStrategy())
    print(f"Suburban Charge: {calculator.calculate_charge(distance)}")

    # Rural delivery: 100.0 for distance 5
    calculator.set_strategy(RuralRateStrategy())
    print(f"Rural Charge: {calculator.calculate_charge(distance)}")


if __name__ == "__main__":
    from app.config import settings

    settings.configure_logging()
    run_demo()
