"""Shared test doubles and feed builders."""
