"""Endpoint facades over the Bitbucket REST API."""
