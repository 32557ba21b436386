"""Ready-made operations for compositree.

These cover the common things to compute over a tree: a weighted total
per node kind (prices, sizes), a count of each kind, and the names in
visit order.
"""

from collections import Counter
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .core.node import Node
from .core.operation import Handler, Operation


class WeightedSumOperation(Operation):
    """Adds a fixed weight per visited node, chosen by the node's kind.

    With ``default=None`` the set of kinds is closed and an unlisted kind
    raises UnhandledKindError. Otherwise unlisted kinds add ``default``.
    Weights are fixed at construction.
    """

    def __init__(self, weights: Mapping[str, float], default: Optional[float] = None):
        self._weights = MappingProxyType(dict(weights))
        self._default = default
        self.total: float = 0
        super().__init__()

    @property
    def weights(self) -> Mapping[str, float]:
        """Read-only view of the weight per kind."""
        return self._weights

    @property
    def default(self) -> Optional[float]:
        return self._default

    def handlers(self) -> Mapping[str, Handler]:
        return {kind: self._adder(weight) for kind, weight in self._weights.items()}

    def _adder(self, weight: float) -> Handler:
        def add(node: Node) -> None:
            self.total += weight
        return add

    def fallback(self, node: Node) -> None:
        if self._default is None:
            return super().fallback(node)
        self.total += self._default

    def accepts_any_kind(self) -> bool:
        return self._default is not None

    def result(self) -> float:
        return self.total

    def reset(self) -> None:
        super().reset()
        self.total = 0


class PriceCalculator(WeightedSumOperation):
    """Prices the vehicles at an airport.

    Planes cost 100 and buses 10; the airport itself is free. Visiting the
    same vehicles again keeps adding until ``reset()`` is called.
    """

    DEFAULT_PRICES: Dict[str, float] = {
        'airport': 0,
        'plane': 100,
        'bus': 10,
    }

    def __init__(self, prices: Optional[Mapping[str, float]] = None):
        super().__init__(prices if prices is not None else self.DEFAULT_PRICES)

    def get_total(self) -> float:
        """Total price of everything visited so far."""
        return self.total


class KindCounter(Operation):
    """Counts visited nodes per kind. Accepts every kind."""

    def __init__(self):
        self.counts: Counter = Counter()
        super().__init__()

    def handlers(self) -> Mapping[str, Handler]:
        return {}

    def fallback(self, node: Node) -> None:
        self.counts[node.kind] += 1

    def accepts_any_kind(self) -> bool:
        return True

    def result(self) -> Counter:
        return Counter(self.counts)

    def reset(self) -> None:
        super().reset()
        self.counts = Counter()


class NameCollector(Operation):
    """Records node names in the order they are visited."""

    def __init__(self):
        self.names: List[str] = []
        super().__init__()

    def handlers(self) -> Mapping[str, Handler]:
        return {}

    def fallback(self, node: Node) -> None:
        self.names.append(node.name)

    def accepts_any_kind(self) -> bool:
        return True

    def result(self) -> List[str]:
        return list(self.names)

    def reset(self) -> None:
        super().reset()
        self.names = []
