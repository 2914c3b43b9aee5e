"""Package configuration: EntropySource enum, GRandConfig, and initialization."""

from __future__ import annotations

import os
import secrets
from dataclasses import dataclass
from enum import Enum

from grand._logging import configure_logging, get_logger
from grand.errors import EntropyUnavailableError

__all__ = [
    'EntropySource',
    'GRandConfig',
    'draw_entropy',
    'get_config',
    'init',
]

logger = get_logger(__name__)


class EntropySource(Enum):
    """Where unpredictable seeds come from."""

    SYSTEM = 'system'
    URANDOM = 'urandom'


@dataclass(frozen=True)
class GRandConfig:
    """Configuration for grand.

    Attributes:
        entropy: Source used for lazy seeding.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    entropy: EntropySource = EntropySource.SYSTEM
    log_level: str | None = None


# Global configuration (set by init(), or lazily by get_config())
_config: GRandConfig | None = None


def _detect_entropy() -> EntropySource:
    """Detect the entropy source from the GRAND_ENTROPY environment variable.

    Unknown values fall back to SYSTEM with a warning.
    """
    env_entropy = os.environ.get('GRAND_ENTROPY', '').lower()
    if not env_entropy:
        return EntropySource.SYSTEM
    try:
        return EntropySource(env_entropy)
    except ValueError:
        logger.warning('unknown_entropy_source', value=env_entropy, fallback=EntropySource.SYSTEM.value)
        return EntropySource.SYSTEM


def _resolve_config(
    entropy: EntropySource | str | None = None,
    log_level: str | None = None,
) -> GRandConfig:
    """Build a GRandConfig from arguments, falling back to the environment."""
    if entropy is None:
        resolved_entropy = _detect_entropy()
    elif isinstance(entropy, str):
        resolved_entropy = EntropySource(entropy.lower())
    else:
        resolved_entropy = entropy

    if log_level is None:
        log_level = os.environ.get('GRAND_LOG_LEVEL') or None

    return GRandConfig(entropy=resolved_entropy, log_level=log_level)


def init(
    entropy: EntropySource | str | None = None,
    log_level: str | None = None,
) -> GRandConfig:
    """Initialize grand with the given configuration.

    Args:
        entropy: Entropy source. Detected from GRAND_ENTROPY if None.
            Can be EntropySource enum or string ("system", "urandom").
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            GRAND_LOG_LEVEL if None; None there too means silent.

    Returns:
        The GRandConfig that was set.

    Raises:
        ValueError: If ``entropy`` is a string naming no known source.

    Example:
        ```python
        import grand

        grand.init(entropy='urandom', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    _config = _resolve_config(entropy, log_level)

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def get_config() -> GRandConfig:
    """Get the current configuration, resolving defaults on first use.

    Unlike ``init()``, the lazy path never configures logging; handlers of
    the host application are left alone.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _resolve_config()
    return _config


def draw_entropy(source: EntropySource | None = None) -> int:
    """Read one unpredictable 32-bit word.

    Args:
        source: Entropy source. The configured source if None.

    Returns:
        An integer in ``[0, 2**32 - 1]``.

    Raises:
        EntropyUnavailableError: If the operating system provides no entropy.
    """
    if source is None:
        source = get_config().entropy
    try:
        if source is EntropySource.URANDOM:
            return int.from_bytes(os.urandom(4), 'little')
        return secrets.randbits(32)
    except (NotImplementedError, OSError) as exc:
        raise EntropyUnavailableError(source.value, str(exc)) from exc
