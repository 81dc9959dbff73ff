"""Customers bounded context: event-sourced Customer registration and email confirmation."""
