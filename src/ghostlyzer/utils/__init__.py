"""Utilities — ambient-context scope, type lookup and the type registry."""
