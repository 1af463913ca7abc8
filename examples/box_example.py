"""
optbox example - optional values without None checks

Run with:
    pip install -e .
    python examples/box_example.py
"""

from optbox import OptionalBox, configure_logging, wrap


def access_examples():
    """Demonstrate reading values out of a box."""
    print("=" * 60)
    print("Access")
    print("=" * 60)

    some_value = wrap(100)
    nothing = wrap(None)

    print(f"some_value.is_present(): {some_value.is_present()}")  # True
    print(f"nothing.is_absent(): {nothing.is_absent()}")  # True
    print(f"nothing.unwrap(): {nothing.unwrap()}")  # None
    print(f"nothing.get_or(0): {nothing.get_or(0)}")  # 0
    print(f"nothing.get_or_compute(...): {nothing.get_or_compute(lambda: 7 * 6)}")  # 42


def other_branch_examples():
    """Demonstrate callbacks fired when a present box comes out empty."""
    print("\n" + "=" * 60)
    print("Other-branch callbacks")
    print("=" * 60)

    rejected = []
    wrap("value").filter(lambda v: False, rejected.append)
    wrap(None).filter(lambda v: False, rejected.append)  # never fires
    print(f"rejected: {rejected}")  # ['value']

    unmapped = []
    doubled = wrap(20071226).map(lambda x: x * 2, unmapped.append)
    emptied = wrap("x").map(lambda x: None, unmapped.append)
    print(f"doubled: {doubled}")  # OptionalBox.Present(40142452)
    print(f"emptied: {emptied}")  # OptionalBox.Absent
    print(f"unmapped: {unmapped}")  # ['x']


def pipeline_examples():
    """Demonstrate chaining and the sequence view."""
    print("\n" + "=" * 60)
    print("Pipelines")
    print("=" * 60)

    prices = {"BTC": 100.5, "ETH": None}

    def price_of(symbol: str) -> OptionalBox[float]:
        return wrap(prices.get(symbol))

    for symbol in ("BTC", "ETH", "SOL"):
        markup = (
            price_of(symbol)
            .filter(lambda p: p > 0)
            .for_each(lambda p: print(f"  {symbol} quoted at {p}"))
            .match(lambda p: round(p * 1.1, 2), lambda: 0.0)
        )
        print(f"{symbol} with 10% markup: {markup}")

    quoted = [p for symbol in prices for p in price_of(symbol)]
    print(f"quoted prices: {quoted}")  # [100.5]


def main():
    """Run all examples."""
    configure_logging(level="DEBUG")
    access_examples()
    other_branch_examples()
    pipeline_examples()


if __name__ == "__main__":
    main()
