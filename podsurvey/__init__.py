"""Podcast survey collection service."""
