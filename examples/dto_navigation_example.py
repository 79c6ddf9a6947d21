#!/usr/bin/env python3
"""
Navigate Nested DTOs Safely

Walks an order document whose shipping details may be missing at any level,
using each form of the nullsafe API.

Usage:
    python dto_navigation_example.py
"""

from dataclasses import dataclass

from nullsafe import Chain, fetch_chain, fetch_chain_or_default, fetch_safe, is_chain_present
from nullsafe.utils import setup_logging
from nullsafe.utils.helpers import get_nested_value


@dataclass
class Address:
    city: str | None = None


@dataclass
class Customer:
    address: Address | None = None


@dataclass
class Order:
    id: str
    customer: Customer | None = None


def main():
    setup_logging(level="DEBUG", log_format="text")

    orders = [
        Order(id="o-1", customer=Customer(address=Address(city="Lisbon"))),
        Order(id="o-2", customer=Customer()),
        Order(id="o-3"),
    ]

    for order in orders:
        print(f"\n{order.id}")
        print("  direct:  ", fetch_safe(lambda: order.customer.address.city))
        print(
            "  chained: ",
            fetch_chain(order, lambda o: o.customer, lambda c: c.address, lambda a: a.city),
        )
        print(
            "  default: ",
            fetch_chain_or_default(order, "unknown", lambda o: o.customer, lambda c: c.address),
        )
        print(
            "  present: ",
            is_chain_present(order, lambda o: o.customer, lambda c: c.address),
        )
        address = Chain(order).then(lambda o: o.customer).then(lambda c: c.address)
        print("  builder: ", address.then(lambda a: a.city).get_or_default("unknown"))
        print("  path:    ", get_nested_value(order, "customer.address.city"))


if __name__ == "__main__":
    main()
