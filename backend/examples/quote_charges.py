"""
Client example for the delivery charge API.

Quotes the same distance under every rate tier by switching the
server's active strategy before each calculation.
"""

import sys

import requests


def quote_all_tiers(base_url: str = "http://localhost:8000", distance: float = 5.0):
    """
    Switch through every tier the server offers and quote one delivery.

    Args:
        base_url: API base URL
        distance: Delivery distance to quote
    """
    response = requests.get(f"{base_url}/api/rate-tiers")
    response.raise_for_status()
    data = response.json()

    print(f"Active zone before quoting: {data['active_zone']}")

    for tier in data["tiers"]:
        response = requests.put(f"{base_url}/api/strategy", json={"zone": tier["zone"]})
        response.raise_for_status()

        response = requests.post(
            f"{base_url}/api/calculate-charge",
            json={"distance": distance}
        )
        if response.status_code == 200:
            quote = response.json()
            print(f"✓ {tier['zone'].capitalize()} Charge: {quote['charge']}")
        else:
            print(f"✗ Failed to quote {tier['zone']}: {response.text}")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        try:
            quote_all_tiers(distance=float(sys.argv[1]))
        except ValueError:
            print("Usage: python quote_charges.py [distance]")
    else:
        quote_all_tiers()
