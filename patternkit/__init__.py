"""Working examples of classic design patterns: builders, prototypes, factories,
adapters, decorators, chains, commands, facades, iterators, mediators,
observers, proxies, visitors, an article store and caches."""

__version__ = "0.1.0"