"""Signature verification gate for authentication assertions.

A SignatureVerifier binds an algorithm identifier (as asserted by the remote
party), the relying party's accepted algorithm names and a public key. The
binding is validated once, at construction:

  1. the identifier must resolve in the COSE registry
  2. the resolved name must be accepted by policy
  3. the algorithm must be usable with the key's type

Steps 1 and 2 raise UnsupportedAlgorithm, step 3 raises IncompatibleKey.

verify() never raises for signature or data inputs. A cryptographic mismatch
and a malformed signature both return False. Errors other than a mismatch
are still False to the caller but are logged and counted as faults.
"""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Union

from .crypto.alg_registry import AlgorithmDescriptor, resolve
from .crypto.provider import verify_primitive
from .errors import IncompatibleKey, UnsupportedAlgorithm
from .obs.prom import observe_rejection, observe_verification
from .utils.logging import get_logger

logger = get_logger()


class SignatureVerifier:
    __slots__ = ("_algorithm", "_cose_algorithm", "_supported_algorithms", "_public_key")

    def __init__(
        self,
        algorithm: Union[AlgorithmDescriptor, int, str],
        supported_algorithms: Iterable[str],
        public_key: Any,
    ):
        if isinstance(supported_algorithms, (str, bytes)):
            raise TypeError("supported_algorithms must be a collection of algorithm names")
        self._algorithm = algorithm
        self._supported_algorithms = frozenset(supported_algorithms)
        self._public_key = public_key
        self._cose_algorithm = self._validate()

    @property
    def algorithm(self) -> AlgorithmDescriptor:
        return self._cose_algorithm

    @property
    def supported_algorithms(self) -> FrozenSet[str]:
        return self._supported_algorithms

    @property
    def public_key(self) -> Any:
        return self._public_key

    def verify(self, signature: bytes, verification_data: bytes) -> bool:
        alg = self._cose_algorithm
        try:
            ok = verify_primitive(alg.scheme, alg.hash_function, self._public_key, signature, verification_data)
        except Exception as e:
            logger.warning("signature verification fault alg=%s error=%s", alg.name, type(e).__name__)
            observe_verification(alg.name, "fault")
            return False
        if not ok:
            logger.debug("signature mismatch alg=%s", alg.name)
        observe_verification(alg.name, "valid" if ok else "invalid")
        return ok

    def _validate(self) -> AlgorithmDescriptor:
        cose_algorithm = resolve(self._algorithm)
        if cose_algorithm is None or cose_algorithm.name not in self._supported_algorithms:
            logger.info("rejected unsupported algorithm %s", self._algorithm)
            observe_rejection("unsupported_algorithm")
            raise UnsupportedAlgorithm(f"Unsupported algorithm {self._algorithm}")
        if not cose_algorithm.is_compatible_key(self._public_key):
            logger.info(
                "rejected algorithm %s for key type %s", cose_algorithm.name, type(self._public_key).__name__
            )
            observe_rejection("incompatible_key")
            raise IncompatibleKey()
        return cose_algorithm

    def __repr__(self) -> str:
        return f"SignatureVerifier(algorithm={getattr(self, '_algorithm', None)!r})"


__all__ = ["SignatureVerifier"]
