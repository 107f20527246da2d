"""Firetrack: personal budget tracking web application."""
