"""Core building blocks shared across compandauth features."""
