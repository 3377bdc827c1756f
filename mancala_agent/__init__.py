"""LLM-driven Mancala player that moves on a Starknet contract."""

__version__ = "0.1.0"
