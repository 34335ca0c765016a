"""Shared cross-cutting helpers (logging, time, id generation)."""
