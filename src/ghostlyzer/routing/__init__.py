"""Routing — outbound URL generation and parameter transformers.

Route templates are registered during setup and rendered into paths
on demand. Inbound matching lives in the host framework.
"""
