"""Intra-session adapter — live re-targeting of the remaining sets."""

from suggestion_engine.adapter.intra_session import IntraSessionAdapter, adapt_intra_session

__all__ = ["IntraSessionAdapter", "adapt_intra_session"]
