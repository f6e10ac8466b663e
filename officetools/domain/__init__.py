"""Domain layer for Office Tools.

This package holds the tool logic (registry, navigation, BMI, crop geometry,
speech settings, compression). It is intentionally framework-agnostic: domain
logic should be testable without Flask.
"""
