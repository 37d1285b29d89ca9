from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from . import config
from .crypto.alg_registry import AlgorithmDescriptor, find_by_name
from .utils.logging import get_logger
from .verifier import SignatureVerifier

DEFAULT_ALGORITHMS: Tuple[str, ...] = ("ES256", "PS256", "RS256")

logger = get_logger()


@dataclass(frozen=True)
class RelyingPartyPolicy:
    """Algorithm names a relying party accepts for assertion signatures."""

    algorithms: Tuple[str, ...] = DEFAULT_ALGORITHMS
    unknown: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        algorithms = tuple(self.algorithms)
        object.__setattr__(self, "algorithms", algorithms)
        unknown = tuple(a for a in algorithms if find_by_name(a) is None)
        object.__setattr__(self, "unknown", unknown)
        if unknown:
            logger.warning("policy lists unknown algorithms: %s", ", ".join(unknown))

    @classmethod
    def from_env(cls) -> "RelyingPartyPolicy":
        return cls(algorithms=tuple(config.SUPPORTED_ALGORITHMS))

    def with_algorithms(self, *names: str) -> "RelyingPartyPolicy":
        extra = tuple(n for n in names if n not in self.algorithms)
        return RelyingPartyPolicy(algorithms=self.algorithms + extra)

    def accepts(self, name: str) -> bool:
        return name in self.algorithms

    def verifier_for(self, algorithm: Union[AlgorithmDescriptor, int, str], public_key: Any) -> SignatureVerifier:
        return SignatureVerifier(algorithm, self.algorithms, public_key)


__all__ = ["RelyingPartyPolicy", "DEFAULT_ALGORITHMS"]
