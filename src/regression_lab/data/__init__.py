"""Synthetic data generation and splitting."""
