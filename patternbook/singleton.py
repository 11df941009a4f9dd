"""Singleton pattern: one shared configuration object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SINGLETON_OBJECT = 100


@dataclass
class Config:
    """Shared settings."""

    pi: float = 3.14
    n: int = 10


_instance: Optional[Config] = None


def get_singleton_object() -> int:
    return SINGLETON_OBJECT


def get_instance() -> Config:
    """Return the shared configuration, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Config()
    return _instance


def delete_instance() -> None:
    """Drop the shared configuration; the next call creates a fresh one."""
    global _instance
    _instance = None


def _describe(label: str, config: Config) -> str:
    return f"{label}: address={hex(id(config))}, PI={config.pi:f}, N={config.n}"


def main(argv=None) -> int:
    print(f"SINGLETON_OBJECT value: {get_singleton_object()}")

    config1 = get_instance()
    print(_describe("CONFIG1", config1))
    config2 = get_instance()
    print(_describe("CONFIG2", config2))

    if config1 is config2:
        print(f"Singleton OK: {hex(id(config1))} == {hex(id(config2))}")
    else:
        print(f"Singleton NG: {hex(id(config1))} != {hex(id(config2))}")

    config2.n = 3
    print(_describe("CONFIG1", config1))
    print(_describe("CONFIG2", config2))

    delete_instance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())