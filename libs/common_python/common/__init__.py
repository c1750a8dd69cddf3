"""Helpers shared by the API service and the jobs."""
