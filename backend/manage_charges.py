#!/usr/bin/env python3
"""
Management utility for the delivery charge calculator.

Usage:
    python manage_charges.py demo                     - Run the strategy swap demonstration
    python manage_charges.py tiers                    - Show all rate tiers
    python manage_charges.py quote <zone> <distance>  - Quote a delivery charge
"""

import math
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.config import settings
from app.demo import run_demo
from app.services import ChargeCalculator, available_zones, get_rate_strategy


def show_tiers(args=None):
    """Display all rate tiers."""
    print("\n" + "="*40)
    print("DELIVERY RATE TIERS")
    print("="*40)
    print(f"{'Zone':<12} {'Rate/unit':<10} {'Strategy'}")
    print("-"*40)

    for zone in available_zones():
        strategy = get_rate_strategy(zone)
        print(f"{zone.value:<12} {strategy.multiplier:<10.2f} {strategy.__class__.__name__}")

    print("-"*40)
    print(f"Default zone: {settings.DEFAULT_DELIVERY_ZONE or 'not set'}")
    print("="*40)


def quote_charge(args):
    """Quote the charge for one delivery."""
    if len(args) != 2:
        print("Usage: python manage_charges.py quote <zone> <distance>")
        return

    zone_name, raw_distance = args
    try:
        strategy = get_rate_strategy(zone_name)
        distance = float(raw_distance)
    except ValueError:
        zones = [zone.value for zone in available_zones()]
        print(f"Invalid input! Zone must be one of {zones} and distance a number.")
        return

    if not math.isfinite(distance):
        print("Distance must be a finite number!")
        return

    if distance < 0:
        print("Distance must not be negative!")
        return

    calculator = ChargeCalculator(strategy)
    charge = calculator.calculate_charge(distance)
    print(f"{strategy.zone.value.capitalize()} Charge: {charge}")


def demo(args=None):
    """Run the strategy swap demonstration."""
    run_demo()


def main(argv=None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__)
        return

    command = argv[0].lower()

    commands = {
        'demo': demo,
        'tiers': show_tiers,
        'quote': quote_charge
    }

    if command in commands:
        commands[command](argv[1:])
    else:
        print(f"Unknown command: {command}")
        print(__doc__)


if __name__ == "__main__":
    settings.configure_logging()
    main()
