#!/usr/bin/env python3
"""
Pricing airport vehicles with an external operation.

This example demonstrates:
- Vehicles of different kinds held by an airport container
- An operation that prices each vehicle by kind without touching the
  vehicle classes
- Writing a one-off operation from plain functions
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import Container, FunctionOperation, Leaf, PriceCalculator


def build_airport() -> Container:
    airport = Container("Airport", kind="airport")
    airport.add(Leaf("Plane", kind="plane"))
    airport.add(Leaf("Bus", kind="bus"))
    return airport


def main():
    airport = build_airport()

    price_calculator = PriceCalculator()
    airport.accept(price_calculator)
    print(f"Total price: {price_calculator.get_total()}")  # Total price: 110

    # Same structure, another operation, no change to the node classes
    seats = FunctionOperation({
        'airport': lambda node: 0,
        'plane': lambda node: 180,
        'bus': lambda node: 50,
    })
    airport.accept(seats)
    for node, value in seats.result():
        print(f"  {node.name}: {value} seats")


if __name__ == "__main__":
    main()
