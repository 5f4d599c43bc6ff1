"""Tests for the fire_swarm package."""
