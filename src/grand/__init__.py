"""grand: easy pseudorandom number generation.

A convenience wrapper around a 32-bit Mersenne Twister that seeds itself from
an unpredictable source on first use, unless a seed was given first, and
offers simple accessors for integers, floats and booleans.

Flat imports (preferred):
    from grand import GRand, shuffle, random_shuffle, RandomAdapter

Submodule imports (for organization):
    from grand.engine import MT19937
    from grand.distributions import uniform_int, uniform_real, bernoulli
    from grand.protocols import UniformRandomBitGenerator
"""

from grand._config import EntropySource, GRandConfig, draw_entropy, get_config, init
from grand._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from grand.algorithms import RandomAdapter, random_shuffle, shuffle
from grand.distributions import bernoulli, generate_canonical, uniform_int, uniform_real
from grand.engine import MT19937
from grand.errors import EntropyUnavailable, EntropyUnavailableError
from grand.grand import GRand, GRandState
from grand.protocols import UniformRandomBitGenerator

__version__ = '1.1.1'

# Guaranteed to increase with each release: 1 01 01 means 1.1.1
PACKAGE_VERSION = 10101

__all__ = [
    'MT19937',
    'PACKAGE_VERSION',
    # Config
    'EntropySource',
    # Errors
    'EntropyUnavailable',
    'EntropyUnavailableError',
    # Generator
    'GRand',
    'GRandConfig',
    'GRandState',
    # Algorithms
    'RandomAdapter',
    'UniformRandomBitGenerator',
    '__version__',
    # Logging
    'add_log_hook',
    # Distributions
    'bernoulli',
    'clear_log_hooks',
    'configure_logging',
    'draw_entropy',
    'generate_canonical',
    'get_config',
    'get_logger',
    'init',
    'random_shuffle',
    'remove_log_hook',
    'shuffle',
    'uniform_int',
    'uniform_real',
]
