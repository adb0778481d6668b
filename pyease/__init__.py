"""Easing functions for animations, and lookups from a curve identifier or
name to the function. See pyease.easing for the functions themselves and
pyease.resolve for the lookups."""
