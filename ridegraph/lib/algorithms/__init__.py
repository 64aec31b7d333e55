"""Shortest-path, route, metric and match-scoring algorithms."""
