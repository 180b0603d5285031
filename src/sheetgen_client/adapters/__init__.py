"""Adapters – outbound integrations."""
